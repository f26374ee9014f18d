"""
Fixed vocabularies used by the text metrics engine.

Both sets are lowercase and immutable; callers compare against
``token.lower()``.
"""

# Common abbreviations whose trailing period does not end a sentence
ABBREVIATIONS = frozenset([
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st",
    "ave", "blvd", "dept", "est", "fig", "govt", "inc", "ltd",
    "vs", "etc", "approx", "appt", "depts",
    # Titles and ranks
    "gen", "hon", "sgt", "cpl", "pvt", "capt", "lt", "col",
    "maj", "cmdr", "adm", "rev",
])

# English function words excluded from top-word frequency analysis.
# Kept minimal: only the most frequent articles, pronouns, prepositions,
# conjunctions and auxiliaries.
STOP_WORDS = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "but", "by",
    "for", "from", "had", "has", "have", "he", "her", "his", "how",
    "i", "if", "in", "into", "is", "it", "its", "my", "no", "not",
    "of", "on", "or", "our", "she", "so", "than", "that", "the",
    "their", "them", "then", "there", "these", "they", "this", "to",
    "up", "us", "was", "we", "were", "what", "when", "which", "who",
    "will", "with", "would", "you", "your",
])
