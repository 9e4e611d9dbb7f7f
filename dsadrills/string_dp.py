"""Edit distance and common subsequences of strings by dynamic programming."""


def edit_distance_naive(first: str, second: str) -> int:
    """Fewest insertions, deletions and replacements turning ``first`` into ``second``.

    Solved by plain recursion.
    """

    def solve(i: int, j: int) -> int:
        if i == len(first):
            return len(second) - j
        if j == len(second):
            return len(first) - i
        if first[i] == second[j]:
            return solve(i + 1, j + 1)
        return 1 + min(solve(i + 1, j + 1), solve(i, j + 1), solve(i + 1, j))

    return solve(0, 0)


def edit_distance(first: str, second: str) -> int:
    """Fewest insertions, deletions and replacements turning ``first`` into ``second``.

    Solved bottom up keeping one column of the table at a time.
    """
    n = len(first)
    following = [n - i for i in range(n + 1)]
    for j in range(len(second) - 1, -1, -1):
        current = [0] * (n + 1)
        current[n] = len(second) - j
        for i in range(n - 1, -1, -1):
            if first[i] == second[j]:
                current[i] = following[i + 1]
            else:
                current[i] = 1 + min(following[i + 1], following[i], current[i + 1])
        following = current
    return following[0]


def longest_common_subsequence_naive(first: str, second: str) -> int:
    """Length of the longest common subsequence, by plain recursion."""

    def solve(i: int, j: int) -> int:
        if i >= len(first) or j >= len(second):
            return 0
        if first[i] == second[j]:
            return 1 + solve(i + 1, j + 1)
        return max(solve(i, j + 1), solve(i + 1, j))

    return solve(0, 0)


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest common subsequence, by filling a table bottom up."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i in range(len(first) - 1, -1, -1):
        for j in range(len(second) - 1, -1, -1):
            if first[i] == second[j]:
                table[i][j] = 1 + table[i + 1][j + 1]
            else:
                table[i][j] = max(table[i][j + 1], table[i + 1][j])
    return table[0][0]


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest subsequence of ``text`` that is a palindrome."""
    return longest_common_subsequence(text[::-1], text)