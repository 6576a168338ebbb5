"""Command-line interface for building and evaluating n-gram models."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from ngramlm.config import LMConfig, NUMBER_OF_LINES
from ngramlm.data.corpus import read_corpus, select_lines, write_lines
from ngramlm.errors import NgramError
from ngramlm.models.bigram import TransitionGraph
from ngramlm.models.unigram import NORMALIZATIONS, TokenCounter
from ngramlm.utils.estimator import ProbabilityEstimator
from ngramlm.utils.evaluator import LineScore, PerplexityEvaluator


logger = logging.getLogger(__name__)

MODELS = ('unigram', 'bigram')


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_model(name: str, text: str, config: LMConfig):
    """Fit the named model on normalized training text."""
    if name == 'unigram':
        model = TokenCounter.from_text(text, normalization=config.normalization)
        logger.info(f"Unigram model: {len(model)} distinct tokens, "
                    f"{model.total()} occurrences")
    elif name == 'bigram':
        model = TransitionGraph.from_text(text)
        logger.info(f"Bigram model: {len(model)} nodes")
        if logger.isEnabledFor(logging.DEBUG):
            for node in model:
                for line in node.describe():
                    logger.debug(line)
    else:
        raise ValueError(f"unknown model {name!r}")
    return model


def run(name: str, config: LMConfig) -> List[LineScore]:
    """Build one model, write its sampled probabilities and line perplexities."""
    text = read_corpus(config.train_path)
    model = build_model(name, text, config)

    estimator = ProbabilityEstimator.seeded(config.seed)
    records = estimator.sample(model, config.number_of_lines)
    write_lines(records, config.probs_path(name))

    eval_text = read_corpus(config.eval_path, keep_lines=True)
    lines = select_lines(eval_text, config.number_of_lines)
    scores = PerplexityEvaluator(model).evaluate(lines)
    write_lines(scores, config.eval_out_path(name))
    return scores


def main(argv=None):
    """Main entry point."""
    defaults = LMConfig()
    parser = argparse.ArgumentParser(
        description='Build unigram/bigram models and score held-out text'
    )
    parser.add_argument(
        'model',
        choices=MODELS + ('all',),
        help='Which model to run'
    )
    parser.add_argument(
        '--train',
        type=Path,
        default=defaults.train_path,
        help='Training text file'
    )
    parser.add_argument(
        '--eval',
        type=Path,
        default=defaults.eval_path,
        help='Evaluation text file'
    )
    parser.add_argument(
        '--out-dir',
        type=Path,
        default=defaults.out_dir,
        help='Directory for probability and evaluation files'
    )
    parser.add_argument(
        '--lines',
        type=int,
        default=NUMBER_OF_LINES,
        help='Number of probability records and evaluation lines to write'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for sampling probability records'
    )
    parser.add_argument(
        '--normalization',
        choices=NORMALIZATIONS,
        default=defaults.normalization,
        help='Unigram denominator: distinct tokens or total occurrences'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log at debug level, including per-node successor counts'
    )

    args = parser.parse_args(argv)
    if args.lines < 1:
        parser.error('--lines must be at least 1')
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = LMConfig(
        train_path=args.train,
        eval_path=args.eval,
        out_dir=args.out_dir,
        number_of_lines=args.lines,
        seed=args.seed,
        normalization=args.normalization,
    )
    config.out_dir.mkdir(parents=True, exist_ok=True)

    names = MODELS if args.model == 'all' else (args.model,)
    try:
        for name in names:
            run(name, config)
    except NgramError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
