"""
Fixed vocabularies for LaTeX repair.

Order matters in KNOWN_COMMANDS: the fuzzy matcher prefers the earlier
entry when two commands are equally close, so lowercase Greek letters
come before their capitalized forms.
"""

# ============================================================================
# LaTeX commands
# ============================================================================

GREEK_LOWER = (
    "alpha",
    "beta",
    "gamma",
    "delta",
    "epsilon",
    "zeta",
    "eta",
    "theta",
    "iota",
    "kappa",
    "lambda",
    "mu",
    "nu",
    "xi",
    "omicron",
    "pi",
    "rho",
    "sigma",
    "tau",
    "upsilon",
    "phi",
    "chi",
    "psi",
    "omega",
)

# Only the capitals LaTeX actually defines (no \Alpha, \Beta, ...)
GREEK_UPPER = (
    "Gamma",
    "Delta",
    "Theta",
    "Lambda",
    "Xi",
    "Pi",
    "Sigma",
    "Upsilon",
    "Phi",
    "Psi",
    "Omega",
)

KNOWN_COMMANDS: tuple[str, ...] = (
    # Big operators
    "frac",
    "sqrt",
    "sum",
    "int",
    "prod",
    "coprod",
    *GREEK_LOWER,
    *GREEK_UPPER,
    # Relations and binary operators
    "infty",
    "approx",
    "cdot",
    "times",
    "div",
    "pm",
    "mp",
    "neq",
    "leq",
    "geq",
    "sim",
    "equiv",
    # Calculus and sets
    "partial",
    "nabla",
    "forall",
    "exists",
    "in",
    "notin",
    "subset",
    "subseteq",
    "cup",
    "cap",
    "emptyset",
    # Arrows
    "rightarrow",
    "Rightarrow",
    "leftarrow",
    "Leftarrow",
    "leftrightarrow",
    "Leftrightarrow",
    "to",
    "mapsto",
    "implies",
    "iff",
    "impliedby",
    # Structure
    "left",
    "right",
    "begin",
    "end",
    # Functions
    "sin",
    "cos",
    "tan",
    "csc",
    "sec",
    "cot",
    "log",
    "ln",
    "exp",
    "lim",
    "sup",
    "inf",
    "max",
    "min",
    # Fonts and text
    "text",
    "mathrm",
    "mathbf",
    "mathit",
    "mathcal",
    "mathbb",
    # Accents
    "hat",
    "bar",
    "vec",
    "dot",
    "ddot",
    "tilde",
    "underline",
    "overline",
    # Ellipses
    "dots",
    "ldots",
    "cdots",
)

# Greek letters that exist in both cases
GREEK_CASE_PAIRS: tuple[tuple[str, str], ...] = tuple(
    (name.lower(), name) for name in GREEK_UPPER if name.lower() in GREEK_LOWER
)

# ============================================================================
# Environments
# ============================================================================

# Longer names first so "pmatrix" wins over "matrix" in an alternation
ENVIRONMENTS = (
    "pmatrix",
    "bmatrix",
    "vmatrix",
    "matrix",
    "array",
    "align",
    "equation",
    "cases",
)

# ============================================================================
# Engineering subscript labels (Eurocode style design/characteristic values)
# ============================================================================

# label -> OCR spellings seen for it
DOMAIN_LABELS: dict[str, tuple[str, ...]] = {
    "Ed": ("E0", "Eo", "EJ", "E d"),
    "Rd": ("R0", "Ro", "RJ", "R d"),
    "Sd": ("S0", "So", "SJ", "S d"),
    "Rk": ("RK", "Rx", "R k"),
    "ck": ("cK", "ek", "c k"),
    "cd": ("c0", "cJ", "c d"),
    "yk": ("yK", "vk", "y k"),
    "yd": ("y0", "vd", "yJ", "y d"),
    "ctm": ("ctrn", "ctn", "c tm"),
    "eff": ("ef", "eft", "etf", "e ff"),
    "tot": ("tat", "t0t", "tct"),
}

# Unit text that gets rewrapped as \text{ unit}
UNITS = (
    "kN/m",
    "N/mm",
    "kNm",
    "MNm",
    "MPa",
    "kPa",
    "GPa",
    "Nm",
    "kN",
    "MN",
    "Pa",
    "mm",
    "cm",
    "kg",
    "N",
    "m",
)

# Words the fuzzy command pass must leave alone
FUZZY_EXEMPT = frozenset(DOMAIN_LABELS) | frozenset(ENVIRONMENTS)
