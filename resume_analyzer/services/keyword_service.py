"""
Keyword extraction and comparison.

Plain frequency counting over stopword-filtered tokens, plus the set of
adjacent-token bigrams. No stemming, no synonyms: "python" and "Python"
match, "developer" and "developers" do not.
"""

import re
from collections import Counter
from typing import Iterable, List, Tuple

STOP_WORDS = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
    "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
    "when", "make", "can", "like", "time", "no", "just", "him", "know", "take",
    "people", "into", "year", "your", "good", "some", "could", "them", "see", "other",
    "than", "then", "now", "look", "only", "come", "its", "over", "think", "also",
    "back", "after", "use", "two", "how", "our", "work", "first", "well", "way",
    "even", "new", "want", "because", "any", "these", "give", "day", "most", "us",
    "is", "was", "are", "been", "has", "had", "were", "said", "did", "having",
    "may", "should", "must",
})

MIN_TOKEN_LENGTH = 3
MAX_SINGLE_KEYWORDS = 30
MAX_KEYWORDS = 40

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


def tokenize(text: str) -> List[str]:
    """Lowercased tokens with punctuation, short words and stopwords removed."""
    words = _NON_WORD.sub(" ", text.lower()).split()
    return [w for w in words if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS]


def extract_keywords(text: str) -> List[str]:
    """
    Rank the keywords of ``text``.

    Returns every distinct adjacent-token bigram in order of first
    appearance, followed by the 30 most frequent single tokens (ties keep
    first-appearance order), truncated to 40 entries overall. A word can
    show up both inside a bigram and on its own.
    """
    words = tokenize(text)
    frequencies = Counter(words)
    phrases = dict.fromkeys(f"{first} {second}" for first, second in zip(words, words[1:]))
    top_words = [word for word, _ in frequencies.most_common(MAX_SINGLE_KEYWORDS)]
    return [*phrases, *top_words][:MAX_KEYWORDS]


def compare_keywords(
    jd_keywords: Iterable[str], resume_keywords: Iterable[str]
) -> Tuple[List[str], List[str]]:
    """
    Split ``jd_keywords`` into (present, missing) by case-insensitive exact
    membership in ``resume_keywords``. Both lists keep job-description order.
    """
    resume_lookup = {keyword.lower() for keyword in resume_keywords}
    present: List[str] = []
    missing: List[str] = []
    for keyword in jd_keywords:
        (present if keyword.lower() in resume_lookup else missing).append(keyword)
    return present, missing
