"""
models.py

The shared objects used in infosource.

"""


class SymbolEntry:
    """
    Represents one row of an information source: a symbol index together with
    its label, codeword and probability.
    """
    def __init__(self, index: int, label: str, code: bytes, probability: float) -> None:
        self.index: int = index
        self.label: str = label
        self.code: bytes = code
        self.probability: float = probability

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolEntry):
            return (self.index == other.index
                    and self.label == other.label
                    and self.code == other.code
                    and self.probability == other.probability)
        return False

    def __hash__(self) -> int:
        return hash((self.index, self.label, self.code))

    def __str__(self) -> str:
        return f"[{self.index}, {self.label}, {list(self.code)}, {self.probability}]"

    def __repr__(self) -> str:
        return self.__str__()
