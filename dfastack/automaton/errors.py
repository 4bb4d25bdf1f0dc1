from typing import Any, Hashable, Optional


class AutomatonError(Exception):
    pass


class InvalidAlphabetError(AutomatonError, ValueError):
    def __init__(self, symbol: Hashable) -> None:
        super().__init__()
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Alphabet must not contain the epsilon symbol {self.symbol!r}"


class UnknownStateError(AutomatonError, KeyError):
    def __init__(self, state: Any) -> None:
        super().__init__()
        self.state = state

    def __str__(self) -> str:
        return f"Unknown DFA state: {self.state!r}"


class UnknownSymbolError(AutomatonError, KeyError):
    def __init__(self, symbol: Hashable, state: Optional[Any] = None) -> None:
        super().__init__()
        self.symbol = symbol
        self.state = state

    def __str__(self) -> str:
        if self.state is None:
            return f"Symbol {self.symbol!r} is not in the alphabet"
        return f"Symbol {self.symbol!r} is not in the alphabet (state: {self.state!r})"


class FrozenAutomatonError(AutomatonError, RuntimeError):
    def __str__(self) -> str:
        return "DFA is already constructed and cannot be modified"
