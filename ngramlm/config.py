"""Run configuration for ngramlm."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


NUMBER_OF_LINES = 100


@dataclass
class LMConfig:
    """File names and limits for one unigram/bigram run."""
    train_path: Path = Path('doyle-27.txt')
    eval_path: Path = Path('doyle-case-27.txt')
    out_dir: Path = Path('.')
    number_of_lines: int = NUMBER_OF_LINES
    seed: Optional[int] = None
    normalization: str = 'types'

    def probs_path(self, model_name: str) -> Path:
        return self.out_dir / f'{model_name}_probs.txt'

    def eval_out_path(self, model_name: str) -> Path:
        return self.out_dir / f'{model_name}_eval.txt'
