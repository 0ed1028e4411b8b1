from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Limits:
    """
    Capacity bounds and behavioral switches shared by every stage.

    Attributes:
        max_expression_size: Longest accepted input string, in characters.
        max_tokens: Most tokens an expression or postfix sequence may hold.
        max_token_length: Longest single token; the rest of a longer run is dropped.
        max_stack_depth: Capacity of the operator and value stacks.
        strict_brackets: Require a closing bracket to match its opening kind.
        fold_signs: Merge a prefix `+`/`-` into the number literal that follows it.
    """

    max_expression_size: int = 1000
    max_tokens: int = 1000
    max_token_length: int = 64
    max_stack_depth: int = 1000
    strict_brackets: bool = False
    fold_signs: bool = True

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.type is int:
                value = getattr(self, f.name)
                if value < 1:
                    raise ValueError(
                        f"Limits: {f.name} must be a positive integer, got {value}"
                    )


DEFAULT_LIMITS = Limits()
