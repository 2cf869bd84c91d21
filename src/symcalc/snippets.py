def forward_reference_session(*, include_cycle: bool = False) -> str:
    maybe_cycle = (
        """
        c = c + a
        print c
        render mixed c
        """
        if include_cycle
        else ""
    )

    return f"""
    # `a` refers to `b` before `b` exists
    a = b + 1
    b = 5
    print a
    render mixed a
    render eager a
    render lazy a
    {maybe_cycle}"""


def snapshot_session() -> str:
    return """
    b = 5
    a = resolve b * 2
    b = 100
    print a
    render mixed a
    """
