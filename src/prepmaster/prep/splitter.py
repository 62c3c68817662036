import re

# Split right after . ! or ? when whitespace follows; the punctuation
# stays with the sentence before it. Abbreviations and decimals are
# not special-cased.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")

MIN_SENTENCE_LEN = 10


def split_sentences(text: str) -> list[str]:
    """Split article text into trimmed sentences longer than 10 characters."""
    sentences = []
    for fragment in _SENTENCE_BOUNDARY.split(text):
        fragment = fragment.strip()
        if len(fragment) > MIN_SENTENCE_LEN:
            sentences.append(fragment)
    return sentences
