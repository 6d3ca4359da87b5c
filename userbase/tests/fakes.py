class FakeHasher:
    """Reversible stand-in so tests don't pay for argon2."""

    def __init__(self) -> None:
        self.calls = 0

    def hash(self, raw: str) -> str:
        self.calls += 1
        return f"fake${raw[::-1]}"

    def verify(self, raw: str, hashed: str) -> bool:
        return hashed == f"fake${raw[::-1]}"


class CountingTokens:
    def __init__(self) -> None:
        self.issued = 0

    def __call__(self, length: int) -> str:
        self.issued += 1
        return str(self.issued).rjust(length, "t")
