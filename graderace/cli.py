"""
GradeRace CLI - summarize a race data page from the command line

    graderace https://example.jp/race/analysis.html --model pro
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import __version__
from .core.config import GradeRaceConfig, load_environment
from .exceptions import GradeRaceError
from .graderace import RaceSummarizer
from .output import emit_summary
from .providers.factory import get_available_providers

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class FlagSpec:
    """One command-line flag"""
    names: Tuple[str, ...]
    help: str
    default: Any = None
    action: Optional[str] = None
    choices: Optional[Tuple[str, ...]] = None
    metavar: Optional[str] = None

    def add_to(self, parser: argparse.ArgumentParser):
        kwargs: Dict[str, Any] = {"help": self.help, "default": self.default}
        if self.action:
            kwargs["action"] = self.action
        if self.choices:
            kwargs["choices"] = self.choices
        if self.metavar:
            kwargs["metavar"] = self.metavar
        parser.add_argument(*self.names, **kwargs)


@dataclass(frozen=True)
class CommandSpec:
    """Static description of the command: name, help text, arguments and flags"""
    name: str
    description: str
    positional: Tuple[FlagSpec, ...] = ()
    flags: Tuple[FlagSpec, ...] = ()


COMMAND = CommandSpec(
    name="graderace",
    description="Fetch a race data analysis page and summarize it with a generative model. "
                "The summary is printed and copied to the clipboard.",
    positional=(
        FlagSpec(("url",), help="URL of the race data analysis page"),
    ),
    flags=(
        FlagSpec(("-m", "--model"), default="flash", metavar="NAME",
                 help="model to use; any name containing 'pro' selects the pro model (default: flash)"),
        FlagSpec(("--provider",), choices=tuple(get_available_providers()),
                 help="summarization provider (default: $GRADERACE_PROVIDER or gemini)"),
        FlagSpec(("--env-file",), default=".env", metavar="PATH",
                 help="dotenv file with API keys, loaded if present (default: .env)"),
        FlagSpec(("--no-clipboard",), action="store_true", default=False,
                 help="only print the summary"),
        FlagSpec(("-v", "--verbose"), action="store_true", default=False,
                 help="enable debug logging"),
    ),
)


@dataclass(frozen=True)
class RunOptions:
    """Options for a single run, built once from the command line"""
    url: str
    model: str = "flash"
    provider: Optional[str] = None
    env_file: str = ".env"
    no_clipboard: bool = False
    verbose: bool = False


def build_parser(command: CommandSpec = COMMAND) -> argparse.ArgumentParser:
    """Build an argument parser from a command description"""
    parser = argparse.ArgumentParser(prog=command.name, description=command.description)
    for flag in command.positional + command.flags:
        flag.add_to(parser)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_options(argv: Optional[Sequence[str]] = None, command: CommandSpec = COMMAND) -> RunOptions:
    """Parse command-line arguments into RunOptions"""
    args = build_parser(command).parse_args(argv)
    return RunOptions(**vars(args))


def configure_logging(verbose: bool = False, level: str = "INFO"):
    """Send log records to stderr so stdout only carries the summary"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr
    )


def run(options: RunOptions) -> int:
    """
    Run the pipeline for one URL and emit the summary

    Raises:
        GradeRaceError: From any stage; nothing is printed or copied in that case
    """
    load_environment(options.env_file)

    config = GradeRaceConfig.from_env(
        provider=options.provider,
        copy_to_clipboard=not options.no_clipboard
    )
    if not options.verbose:
        logging.getLogger().setLevel(config.log_level.upper())

    pipeline = RaceSummarizer(config)
    result = pipeline.summarize_url_sync(options.url, options.model)

    emit_summary(result.text, copy=config.copy_to_clipboard)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the GradeRace CLI"""
    options = parse_options(argv)
    configure_logging(options.verbose)

    try:
        return run(options)
    except GradeRaceError as e:
        logger.critical(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
