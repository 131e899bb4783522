"""Built-in name and label lists for fixture generation.

Used whenever no NAMES_FILE / LABELS_FILE is configured.
"""

DEFAULT_NAMES: tuple[str, ...] = (
    "adam",
    "ben",
    "charlie",
    "dawson",
    "ernest",
    "ferdinand",
    "gunther",
    "harold",
    "ingram",
    "jack",
    "kevin",
    "lex",
    "martin",
    "nick",
    "olaf",
    "patric",
)

DEFAULT_LABELS: tuple[str, ...] = (
    "smart",
    "beautiful",
    "slow",
    "smelly",
    "good-looking",
    "clever",
    "curious",
    "intelligent",
    "annoying",
    "self-centered",
)

# Column width of users.name and tags.title
MAX_ENTRY_LENGTH = 64

RANK_MIN = 0
RANK_MAX = 9
