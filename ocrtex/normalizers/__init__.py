"""
Normalizers for OCR-recognized LaTeX.

- clean / repair: ordered heuristic repair pipeline for one math span
- find_best_match / levenshtein_distance: vocabulary matching used by
  the fuzzy command pass
- vocabulary: fixed command, environment, label and unit lists
"""

from ocrtex.normalizers.fuzzy import (
    UNRELATED_DISTANCE,
    find_best_match,
    levenshtein_distance,
)
from ocrtex.normalizers.latex_repair import (
    RepairResult,
    balance_braces,
    build_passes,
    clean,
    correct_fuzzy_commands,
    fix_literals,
    repair,
    repair_decimal_separators,
    repair_domain_labels,
    repair_ellipsis,
    repair_environments,
    repair_fractions,
    unify_greek_case,
)
from ocrtex.normalizers.vocabulary import (
    DOMAIN_LABELS,
    ENVIRONMENTS,
    KNOWN_COMMANDS,
    UNITS,
)

__all__ = [
    # Pipeline
    "clean",
    "repair",
    "RepairResult",
    "build_passes",
    # Individual passes
    "fix_literals",
    "repair_environments",
    "repair_decimal_separators",
    "repair_domain_labels",
    "repair_fractions",
    "correct_fuzzy_commands",
    "unify_greek_case",
    "repair_ellipsis",
    "balance_braces",
    # Matching
    "levenshtein_distance",
    "find_best_match",
    "UNRELATED_DISTANCE",
    # Vocabularies
    "KNOWN_COMMANDS",
    "ENVIRONMENTS",
    "DOMAIN_LABELS",
    "UNITS",
]
