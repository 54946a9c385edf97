"""Error taxonomy shared by the repositories, the stats engine and the API."""


class ParseError(ValueError):
    """Malformed date, day-of-week or identifier input. Never retried."""


class PersistenceError(RuntimeError):
    """The store was unavailable or a query failed.

    Read paths swallow this into a zero/empty default; write paths let it
    propagate so the caller can report the failure.
    """

    def __init__(self, op: str):
        super().__init__(f"store failure during {op}")
        self.op = op
