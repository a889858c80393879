r"""
Heuristic repair of OCR-corrupted LaTeX.

OCR engines mangle LaTeX in a small number of predictable ways: a
backslash read as ``|`` or ``l``, ``{,}`` read as ``f,}``, ``}{`` read as
``)(``, doubled letters, lost braces. This module fixes those with an
ordered list of pure ``str -> str`` passes:

1. Literal fixups (``\ sum`` -> ``\sum``, known broken spellings)
2. Environment repair (``\begin{pmatrix)`` -> ``\begin{pmatrix}``, ``||`` -> ``\\``)
3. Decimal separator repair (``16f,}6`` -> ``16{,}6``)
4. Domain-label and unit repair (``_{E0}`` -> ``_{Ed}``, ``\text{kN}`` -> ``\text{ kN}``)
5. Fraction argument repair (``\frac{1)(2}`` -> ``\frac{1}{2}``)
6. Fuzzy command correction (``|alpba`` -> ``\alpha``), Greek case
   unification and ellipsis repair
7. Brace balancing
8. Whitespace trim

Order matters: later passes assume the earlier normalization ran. None
of the passes raise; the worst case is text returned unchanged. Running
the pipeline twice is not guaranteed to be a no-op.

Example:
    >>> clean(r"\ sum")
    '\\sum'
    >>> clean(r"\begin{pmatrix)")
    '\\begin{pmatrix}'
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field

from ocrtex.config import RepairConfig
from ocrtex.normalizers.fuzzy import find_best_match
from ocrtex.normalizers.vocabulary import (
    DOMAIN_LABELS,
    ENVIRONMENTS,
    FUZZY_EXEMPT,
    GREEK_CASE_PAIRS,
    KNOWN_COMMANDS,
    UNITS,
)

logger = logging.getLogger(__name__)

RepairPass = Callable[[str], str]


# ============================================================================
# Patterns
# ============================================================================

# Exact (broken, fixed) pairs seen often enough to hardcode
LITERAL_FIXUPS: tuple[tuple[str, str], ...] = (
    ("\\sqrtt", "\\sqrt"),
    ("\\summm", "\\sum"),
    ("\\inttt", "\\int"),
    ("\\ffrac", "\\frac"),
    ("\\endípmatrix", "\\end{pmatrix}"),
    ("\\begin{pmatrix)", "\\begin{pmatrix}"),
)

# \begin/\end + noise + environment name + trailing noise
ENVIRONMENT_PATTERN = re.compile(
    r"\\(begin|end)\s*[íli{(\[]*\s*(" + "|".join(ENVIRONMENTS) + r")(?![a-zA-Z*])(?:\s*[)}\]í])*",
    re.IGNORECASE,
)

# Digits, a comma wrapped by at least one brace stand-in, digits
DECIMAL_PATTERN = re.compile(r"(\d)(?:[{(\[ft|],[})\]|]?|,[})\]|])(?=\d)")

_NOISE_TO_LABEL = {label: label for label in DOMAIN_LABELS}
for _label, _spellings in DOMAIN_LABELS.items():
    for _spelling in _spellings:
        _NOISE_TO_LABEL[_spelling] = _label

_NOISE_ALTERNATION = "|".join(
    re.escape(s) for s in sorted(_NOISE_TO_LABEL, key=lambda s: (-len(s), s))
)
_LABEL_SUFFIX = r"[0-9.,;:']*"

# \text{E0} / \mathrm{ Rd1 } -> label inside a text command
TEXT_LABEL_PATTERN = re.compile(
    r"\\(text|mathrm)\{\s*(" + _NOISE_ALTERNATION + r")(" + _LABEL_SUFFIX + r")\s*\}"
)
# _{E0} / _{ yd, } -> label inside a subscript group
SUBSCRIPT_LABEL_PATTERN = re.compile(
    r"_\{\s*(" + _NOISE_ALTERNATION + r")(" + _LABEL_SUFFIX + r")\s*\}"
)

# \text{kN}, \mathrm{ MPa }, \text kN, \text{m^2} -> \text{ unit} + superscript
UNIT_PATTERN = re.compile(
    r"\\(?:text|mathrm)(?:\s*(\{)\s*|\s+)("
    + "|".join(re.escape(u) for u in UNITS)
    + r")(\^\{?-?\d+\}?)?(?(1)\s*\}|(?![A-Za-z]))"
)

# Fraction repairs, applied in this order
FRAC_IMPLICIT_ZERO = re.compile(r"\\frac-")
FRAC_MISSING_OPEN = re.compile(r"\\frac\s*(?!\{)([^{}\s\\$]+)\}\{")
FRAC_PAREN_IN_GROUP = re.compile(r"\\frac\{([^{}()]+?)\)\s*\(?\s*\{?([^{}()]+)\}")
FRAC_BETWEEN_GROUPS = re.compile(r"(\\frac\{[^{}]*\})(?:\s*[-()]+\s*|\s+)\{?(?=[^{}]*\})")
FRAC_SPACE_IN_GROUP = re.compile(r"\\frac\{\s*([^{}\s]+)\s+([^{}\s]+)\s*\}(?!\s*\{)")
FRAC_ZERO_NUMERATOR = re.compile(r"(\\frac\{)[Oo](\})")
FRAC_ZERO_DENOMINATOR = re.compile(r"(\\frac\{[^{}]*\}\{)[Oo](\})")

# Optional backslash-like prefix followed by 3+ letters
COMMAND_TOKEN_PATTERN = re.compile(r"([\\|/lI1])?([a-zA-Z]{3,})")

# \dot with nothing to put a dot on
BARE_DOT_PATTERN = re.compile(r"\\dot(?![A-Za-z{])(?=\s*(?:[^\sA-Za-z{\\]|$))")

# One pattern per Greek letter that exists in both cases
GREEK_CASE_PATTERNS = [
    ((lower, upper), re.compile(r"\\(" + lower + "|" + upper + r")(?![A-Za-z])"))
    for lower, upper in GREEK_CASE_PAIRS
]


# ============================================================================
# Result
# ============================================================================


@dataclass
class RepairResult:
    """Result of running the repair pipeline on one span."""

    original_text: str
    cleaned_text: str
    changes_made: list[tuple[str, str, str]] = field(default_factory=list)  # (pass, before, after)

    @property
    def change_count(self) -> int:
        """Number of passes that changed the text."""
        return len(self.changes_made)

    @property
    def was_modified(self) -> bool:
        """Whether any changes were made."""
        return self.original_text != self.cleaned_text

    @property
    def passes_applied(self) -> list[str]:
        return [name for name, _, _ in self.changes_made]


# ============================================================================
# Passes
# ============================================================================


def fix_literals(text: str) -> str:
    """Collapse ``\\ `` into ``\\`` and apply the fixed replacement table."""
    text = text.replace("\\ ", "\\")
    for broken, fixed in LITERAL_FIXUPS:
        text = text.replace(broken, fixed)
    return text


def repair_environments(text: str) -> str:
    """Canonicalize mangled ``\\begin``/``\\end`` and turn ``||`` into ``\\\\``."""
    text = ENVIRONMENT_PATTERN.sub(
        lambda m: f"\\{m.group(1).lower()}{{{m.group(2).lower()}}}",
        text,
    )
    return text.replace("||", "\\\\")


def repair_decimal_separators(text: str) -> str:
    """Rewrite OCR noise around a decimal comma to ``{,}``."""
    return DECIMAL_PATTERN.sub(r"\1{,}", text)


def repair_domain_labels(text: str) -> str:
    """Recover subscript labels from OCR spellings and rewrap unit text."""
    text = TEXT_LABEL_PATTERN.sub(
        lambda m: f"\\{m.group(1)}{{{_NOISE_TO_LABEL[m.group(2)]}{m.group(3)}}}",
        text,
    )
    text = SUBSCRIPT_LABEL_PATTERN.sub(
        lambda m: f"_{{{_NOISE_TO_LABEL[m.group(1)]}{m.group(2)}}}",
        text,
    )
    return UNIT_PATTERN.sub(
        lambda m: f"\\text{{ {m.group(2)}}}{m.group(3) or ''}",
        text,
    )


def repair_fractions(text: str) -> str:
    """Fix placeholders and separators in ``\\frac`` arguments."""
    if "\\frac" not in text:
        return text
    text = FRAC_IMPLICIT_ZERO.sub(r"\\frac{0-", text)
    text = FRAC_MISSING_OPEN.sub(r"\\frac{\1}{", text)
    text = FRAC_PAREN_IN_GROUP.sub(r"\\frac{\1}{\2}", text)
    text = FRAC_BETWEEN_GROUPS.sub(r"\1{", text)
    text = FRAC_SPACE_IN_GROUP.sub(r"\\frac{\1}{\2}", text)
    text = FRAC_ZERO_NUMERATOR.sub(r"\g<1>0\g<2>", text)
    return FRAC_ZERO_DENOMINATOR.sub(r"\g<1>0\g<2>", text)


def correct_fuzzy_commands(
    text: str,
    commands: tuple[str, ...] = KNOWN_COMMANDS,
    max_prefixed_distance: int = 2,
    max_plain_distance: int = 1,
) -> str:
    """
    Rewrite command-like words to the nearest known command.

    Words are runs of 3+ letters, optionally preceded by a backslash or a
    character OCR confuses with one (``| / l I 1``). Matches are applied
    right to left so earlier offsets stay valid.

    Without a prefix the budget is always ``max_plain_distance``, and a
    capitalized word is never turned into a lowercase command ("Start"
    stays "Start" instead of becoming ``\\star``).
    """
    known = frozenset(commands)
    matches = list(COMMAND_TOKEN_PATTERN.finditer(text))

    for match in reversed(matches):
        prefix, word = match.group(1), match.group(2)
        has_prefix = prefix is not None

        if prefix == "\\" and word in known:
            continue
        if word in FUZZY_EXEMPT:
            continue

        if has_prefix and len(word) > 4:
            max_distance = max_prefixed_distance
        else:
            max_distance = max_plain_distance

        best = find_best_match(word, commands, max_distance)
        if best is None:
            continue
        if not has_prefix and word[0].isupper() and best[0].islower():
            continue

        replacement = "\\" + best
        if match.group(0) != replacement:
            logger.debug("Command %r -> %r", match.group(0), replacement)
            text = text[: match.start()] + replacement + text[match.end() :]

    return text


def unify_greek_case(text: str) -> str:
    """
    Make mixed-case uses of one Greek letter agree with the majority.

    ``\\lambda + \\lambda + \\Lambda`` becomes all ``\\lambda``; a tie is
    left as is.
    """
    for (lower, upper), pattern in GREEK_CASE_PATTERNS:
        counts = Counter(m.group(1) for m in pattern.finditer(text))
        if not counts[lower] or not counts[upper] or counts[lower] == counts[upper]:
            continue
        winner = lower if counts[lower] > counts[upper] else upper
        text = pattern.sub(lambda m, w=winner: "\\" + w, text)
    return text


def repair_ellipsis(text: str) -> str:
    """Turn an argument-less ``\\dot`` into ``\\dots``."""
    return BARE_DOT_PATTERN.sub(r"\\dots", text)


def _drop_unmatched_closers(text: str) -> str:
    depth = 0
    kept = []
    for char in text:
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                continue
            depth -= 1
        kept.append(char)
    return "".join(kept)


def balance_braces(text: str) -> str:
    """
    Make the number of ``{`` and ``}`` equal.

    Surplus closers are stripped from the end (along with trailing
    whitespace); any that remain elsewhere are dropped where they have no
    opener. Missing closers are appended.
    """
    opens = text.count("{")
    closes = text.count("}")

    while closes > opens:
        if text.endswith("}"):
            text = text[:-1]
            closes -= 1
        elif text and text[-1].isspace():
            text = text[:-1]
        else:
            break

    if closes > opens:
        text = _drop_unmatched_closers(text)
        closes = text.count("}")

    if opens > closes:
        text += "}" * (opens - closes)
    return text


# ============================================================================
# Pipeline
# ============================================================================


def build_passes(config: RepairConfig | None = None) -> list[tuple[str, RepairPass]]:
    """Return the ordered (name, pass) list for ``config``."""
    if config is None:
        config = RepairConfig()

    commands = KNOWN_COMMANDS + tuple(
        sorted(c for c in config.additional_commands if c not in KNOWN_COMMANDS)
    )

    passes: list[tuple[str, RepairPass]] = [
        ("literal_fixups", fix_literals),
        ("environments", repair_environments),
        ("decimal_separators", repair_decimal_separators),
        ("domain_labels", repair_domain_labels),
        ("fractions", repair_fractions),
    ]
    if config.fuzzy_commands:
        passes.append(
            (
                "fuzzy_commands",
                lambda text: correct_fuzzy_commands(
                    text,
                    commands,
                    config.max_prefixed_distance,
                    config.max_plain_distance,
                ),
            )
        )
    if config.unify_greek_case:
        passes.append(("greek_case", unify_greek_case))
    passes.extend(
        [
            ("ellipsis", repair_ellipsis),
            ("braces", balance_braces),
            ("trim", str.strip),
        ]
    )
    return passes


def repair(text: str, config: RepairConfig | None = None) -> RepairResult:
    """
    Run the repair pipeline and record which passes changed the text.

    Args:
        text: A math span, normally including its delimiters.
        config: Optional repair configuration.

    Returns:
        RepairResult with the cleaned text and per-pass changes.
    """
    changes: list[tuple[str, str, str]] = []
    current = text
    for name, repair_pass in build_passes(config):
        updated = repair_pass(current)
        if updated != current:
            changes.append((name, current, updated))
            current = updated

    if changes:
        logger.debug(
            "Repaired %r -> %r (%s)", text, current, ", ".join(name for name, _, _ in changes)
        )
    return RepairResult(original_text=text, cleaned_text=current, changes_made=changes)


def clean(text: str, config: RepairConfig | None = None) -> str:
    r"""
    Heuristically clean OCR errors in a LaTeX string.

    Example:
        >>> clean(r"$x \dot = 5$")
        '$x \\dots = 5$'
    """
    return repair(text, config).cleaned_text
