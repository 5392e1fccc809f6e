"""Suggestion filters and quality ranking."""

import re
import string

from spellfuge.core.protocols import LanguageModel
from spellfuge.utils.constants import Constants
from spellfuge.utils.helpers import starts_with_uppercase

# Spellings deprecated by the 2017 orthography update and vulgar forms
PREVENT_SUGGESTION = re.compile(
    ".*(Majonäse|Bravur|Anschovis|Belkanto|Campagne|Frotté|Grisli|Jockei|Joga|Kalvinismus|Kanossa|Kargo|Ketschup|"
    "Kollier|Kommunikee|Masurka|Negligee|Nessessär|Poulard|Varietee|Wandalismus|kalvinist|[Ff]ick).*"
)

# Shapes produced by bad splits ("Mediation s-Background", "Pseudo- Rebellentum", ...)
_REJECTED_SHAPES = [
    re.compile(p)
    for p in (
        r".+[*_:]in",
        r".+[*_:]innen",
        r".+\szigste[srnm]",
        r"[\wöäüÖÄÜß]+ [a-zöäüß]-[\wöäüÖÄÜß]+",
        r"[\wöäüÖÄÜß]+- [\wöäüÖÄÜß]+",
        r"[A-ZÄÖÜ][a-zäöüß]+-[a-zäöüß]+-[a-zäöüß]+",
        r"[A-ZÄÖÜ][a-zäöüß]+- [a-zäöüßA-ZÄÖÜ\-]+",
        r"[\wöäüÖÄÜß]+ -[\wöäüÖÄÜß]+",
        r"[A-ZÖÄÜa-zöäüß] .+",
        r".+ [a-zöäüßA-ZÖÄÜ]",
    )
]
_REJECTED_ENDINGS = ("roulett", "-s", " de", " en")

# Never offered, matched against the lowercased suggestion
DO_NOT_SUGGEST = frozenset(
    [
        "verjuden", "verjudet", "verjudeter", "verjudetes", "verjudeten", "verjudetem",
        "entjuden", "entjudet", "entjudete", "entjudetes", "entjudeter", "entjudeten", "entjudetem",
        "auschwitzmythos",
        "judensippe", "judensippen",
        "judensippschaft", "judensippschaften",
        "nigger", "niggern", "niggers",
        "rassejude", "rassejuden", "rassejüdin", "rassejüdinnen",
        "möse", "mösen", "fotze", "fotzen",
        "judenfrei", "judenfreie", "judenfreier", "judenfreies", "judenfreien", "judenfreiem",
        "judenrein", "judenreine", "judenreiner", "judenreines", "judenreinen", "judenreinem",
        "judenmord", "judenmorden", "judenmörder",
    ]
)
_DO_NOT_SUGGEST_PATTERNS = [re.compile(r"neger.*"), re.compile(r".+neger(s|n|in|innen)?")]

_ONE_LETTER_WORD = re.compile(rf"[A-Za-z0-9_][{re.escape(string.punctuation)}]?")
_SINGLE_LETTER_SPLIT = re.compile(r"[^\W\d_] [^\W\d_]+")


def accept_suggestion(suggestion: str) -> bool:
    """Reject deprecated spellings and artifacts of bad word splits."""
    if PREVENT_SUGGESTION.fullmatch(suggestion):
        return False
    if "--" in suggestion or suggestion.endswith(_REJECTED_ENDINGS):
        return False
    return not any(p.fullmatch(suggestion) for p in _REJECTED_SHAPES)


def is_denied(suggestion: str) -> bool:
    """Check the denylist of slurs, exact and patterned."""
    lowered = suggestion.lower()
    if lowered in DO_NOT_SUGGEST:
        return True
    return any(p.fullmatch(lowered) for p in _DO_NOT_SUGGEST_PATTERNS)


def fold_for_variant(suggestion: str, variant: str) -> str:
    """Swiss German never writes "ß"."""
    if variant == Constants.SWISS_VARIANT:
        return suggestion.replace("ß", "ss")
    return suggestion


def filter_for_variant(suggestions: list[str], variant: str) -> list[str]:
    """Fold locale spellings and drop one-letter fragments and leading hyphens.

    Removes suggestions like "Mafiosi s" and suggestions starting with "-"
    such as "-Gratifikationskrisen".
    """
    result = []
    for suggestion in suggestions:
        suggestion = fold_for_variant(suggestion, variant)
        if any(_ONE_LETTER_WORD.fullmatch(part) for part in suggestion.split(" ")):
            continue
        if len(suggestion) > 1 and suggestion.startswith("-"):
            continue
        result.append(suggestion)
    return result


def is_single_letter_split(suggestion: str) -> bool:
    """Check for artifacts like "ü berstenden"."""
    return _SINGLE_LETTER_SPLIT.fullmatch(suggestion) is not None


def sort_suggestions_by_quality(
    misspelling: str, suggestions: list[str], language_model: LanguageModel | None = None
) -> list[str]:
    """Move case-only variants and multi-word suggestions to the front.

    A two-word suggestion is not moved when the language model rates the
    joined form higher than the phrase, or has never seen the phrase. All
    other suggestions keep their relative order.

    Args:
        misspelling: The flagged word
        suggestions: Suggestions in generation order
        language_model: Optional model for two-word suggestions

    Returns:
        Reordered suggestions
    """
    top = []
    rest = []
    lowered = misspelling.lower()

    for suggestion in suggestions:
        if suggestion.lower() == lowered:
            top.append(suggestion)
        elif " " in suggestion:
            words = re.sub(r"\.$", "", suggestion).split(" ", 1)
            if language_model is not None and len(words) == 2:
                joined = language_model.pseudo_probability([words[0] + words[1]])
                split = language_model.pseudo_probability(words)
                if joined > split or split == 0:
                    rest.append(suggestion)
                else:
                    top.append(suggestion)
            else:
                top.append(suggestion)
        else:
            rest.append(suggestion)

    return top + rest


def filter_phrases(suggestions: list[str], morphology) -> list[str]:
    """Drop two-word suggestions shaped like "Release Prozess".

    Both words capitalized, the first a noun, adjective or unknown word and
    the second a noun or unknown word: such phrases are almost always a
    compound that should be written together.
    """
    result = []
    for suggestion in suggestions:
        words = suggestion.split()
        if (
            len(words) >= 2
            and starts_with_uppercase(words[0])
            and starts_with_uppercase(words[1])
            and morphology.is_adj_or_noun_or_unknown(words[0])
            and morphology.is_noun_or_unknown(words[1])
        ):
            continue
        result.append(suggestion)
    return result
