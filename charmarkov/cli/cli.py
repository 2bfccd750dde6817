"""
cli.py - command line front end for the character Markov model
Features:
- Trains a LanguageModel on a corpus file and prints generated text
- Window length, output length and seed come from flags or a JSON config
- Optional dump of the learned tables as a Rich table
"""

import argparse
import logging
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape
from rich import box

from charmarkov.core.language_model import LanguageModel
from charmarkov.utils.config_manager import Config, ConfigError
from charmarkov.utils.corpus_reader import read_corpus
from charmarkov.utils import logger_utils
from charmarkov.utils.logger_utils import Log

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charmarkov",
        description="Train a character-level Markov model on a text file and generate text from it",
    )
    parser.add_argument("corpus", help="training text file")
    parser.add_argument("initial_text", nargs="?", default=None,
                        help="seed text (default: first window of the corpus)")
    parser.add_argument("-w", "--window", type=int, default=None, help="window length (order)")
    parser.add_argument("-n", "--length", type=int, default=None, help="characters to generate")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible output")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--dump", action="store_true", help="print the learned tables")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    return parser


def render_model(model: LanguageModel) -> Table:
    """One row per window, entries in insertion order."""
    table = Table(title=f"window length {model.window_length}", box=box.SIMPLE)
    table.add_column("window", style="cyan")
    table.add_column("next chars (count, p, cp)")
    for window, freq in model.store.items():
        table.add_row(Text(repr(window)), Text(str(freq)))
    return table


def run(args: argparse.Namespace) -> int:
    cfg = Config(args.config)
    level = cfg.get("log_level")
    if args.verbose:
        level = "DEBUG" if args.verbose > 1 else "INFO"
    logger_utils.configure(level)

    for key, val in (("window_length", args.window), ("length", args.length), ("seed", args.seed)):
        if val is not None:
            cfg.override(key, val)

    model = LanguageModel(cfg.get("window_length"), seed=cfg.get("seed"))
    length = cfg.get("length")

    text = read_corpus(args.corpus, encoding=cfg.get("encoding"))
    with Log.time_block("training"):
        model.train(text)

    if args.dump:
        console.print(render_model(model))

    seed_text = args.initial_text
    if seed_text is None:
        seed_text = text[:model.window_length]

    with Log.time_block("generation"):
        out = model.generate(seed_text, length)
    console.print(Panel(Text(out), title="generated", expand=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except ConfigError as e:
        logger.error("config error: %s", e)
        err_console.print(f"[red]config error:[/red] {escape(str(e))}")
        return 2
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read corpus: %s", e)
        err_console.print(f"[red]cannot read corpus:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
