from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

P = TypeVar("P")

"""A registered callback paired with the id the emitter issued for it."""
@dataclass
class Listener(Generic[P]):
    id: int
    callback: Callable[[P], None]
