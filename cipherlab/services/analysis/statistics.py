from collections import Counter
from typing import ClassVar

from cipherlab.services.engines.alphabet import ENGLISH, Alphabet


class StatisticalAnalyzer:
    """
    Letter statistics for cryptanalysis.

    - Letter counts in order of first appearance
    - Letters ranked by frequency
    - Chi-squared against English
    """

    # English letter frequencies for chi-squared testing
    ENGLISH_FREQ: ClassVar[dict[str, float]] = {
        "E": 12.70, "T": 9.06, "A": 8.17, "O": 7.51, "I": 6.97,
        "N": 6.75, "S": 6.33, "H": 6.09, "R": 5.99, "D": 4.25,
        "L": 4.03, "C": 2.78, "U": 2.76, "M": 2.41, "W": 2.36,
        "F": 2.23, "G": 2.02, "Y": 1.97, "P": 1.93, "B": 1.29,
        "V": 0.98, "K": 0.77, "J": 0.15, "X": 0.15, "Q": 0.10,
        "Z": 0.07,
    }

    def __init__(self, alphabet: Alphabet = ENGLISH):
        self.alphabet = alphabet

    def letter_counts(self, text: str) -> Counter[str]:
        """
        Count uppercase alphabet letters.

        The counter keeps letters in the order they are first encountered.
        """
        return Counter(self.alphabet.only_letters(text))

    def ranked_letters(self, text: str) -> list[str]:
        """
        Distinct letters by descending frequency.

        Ties keep their order of first appearance in the text.
        """
        counts = self.letter_counts(text)
        return [char for char, _ in sorted(counts.items(), key=lambda x: -x[1])]

    def chi_squared(self, text: str) -> float:
        """
        Calculate chi-squared statistic against English frequencies.

        Lower values indicate closer match to English.
        """
        counts = self.letter_counts(text)
        n = sum(counts.values())
        if n == 0:
            return 0.0

        chi_squared = 0.0

        for letter in self.alphabet.letters:
            observed = counts.get(letter, 0)
            expected = (self.ENGLISH_FREQ.get(letter, 0) / 100) * n

            if expected > 0:
                chi_squared += ((observed - expected) ** 2) / expected

        return chi_squared

    def english_score(self, text: str) -> float:
        """
        Score text based on how well it matches English frequencies.

        Lower score = better match to English.
        """
        return self.chi_squared(text)
