from .core import run_game, run_batch
from .io import write_csv, write_manifest

__all__ = ["run_game", "run_batch", "write_csv", "write_manifest"]
