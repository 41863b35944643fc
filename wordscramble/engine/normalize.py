"""
Input normalization.

Every rule in the engine compares the *normalized* candidate: surrounding
whitespace and newlines stripped, then lowercased. The normalized form is
also what gets stored in the used-words history on acceptance.
"""


def normalize(raw: str) -> str:
    """
    Trim leading/trailing whitespace (incl. newlines) and lowercase.

    Idempotent: normalize(normalize(x)) == normalize(x).

    Examples:
      normalize("  Silk\\n") -> "silk"
      normalize("silk")      -> "silk"
    """
    return raw.strip().lower()
