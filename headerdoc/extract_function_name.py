"""Extract the short name of a function declaration."""

INVALID_FUNCTION_NAME = "INVALID FUNCTION NAME"


def extract_function_name(line: str) -> str:
    """Return the token right before the first ``(``.

    ``virtual UWorld* GetWorld() const override;`` -> ``GetWorld``
    """
    open_idx = line.find("(")
    if open_idx == -1:
        return INVALID_FUNCTION_NAME
    head = line[:open_idx].split()
    if not head:
        return INVALID_FUNCTION_NAME
    return head[-1].lstrip("*&") or INVALID_FUNCTION_NAME
