from __future__ import annotations

VOWELS = frozenset("aeiouy")


def syllables_in_word(word: str | None) -> int:
    """
    Estimate syllables by counting runs of vowels.

    A trailing ``e`` that opens its own vowel run is treated as silent, so
    ``cake`` scores 1 while ``free`` keeps its single ``ee`` run.
    """
    if not word:
        return 0

    lowered = word.lower()
    count = 0
    previous_is_vowel = False
    for char in lowered:
        is_vowel = char in VOWELS
        if is_vowel and not previous_is_vowel:
            count += 1
        previous_is_vowel = is_vowel

    if (
        lowered.endswith("e")
        and (len(lowered) == 1 or lowered[-2] not in VOWELS)
        and count > 0
    ):
        count -= 1
    return count
