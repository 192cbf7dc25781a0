from .cargo_client import SubprocessCargoClient
from .fakes import CargoCall, FakeCargoClient

__all__ = [
    "CargoCall",
    "FakeCargoClient",
    "SubprocessCargoClient",
]
