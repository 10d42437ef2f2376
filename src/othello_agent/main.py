import typer
from pathlib import Path
from typing import Optional

from othello_agent.commands.find_move import FindMove
from othello_agent.commands.self_play import SelfPlay
from othello_agent.config import get_search_depth, get_weights_path, get_weights_preset
from othello_agent.evaluation.evaluator import HeuristicEvaluator
from othello_agent.evaluation.weights import EvaluatorWeights


def load_evaluator(
    weights_file: Optional[Path], preset: Optional[str]
) -> HeuristicEvaluator:
    if weights_file is None:
        weights_file = get_weights_path()

    if preset is None:
        preset = get_weights_preset()

    try:
        weights = EvaluatorWeights.load(weights_file, preset)
    except ValueError as e:
        # Also catches pydantic's ValidationError, which subclasses ValueError.
        raise typer.BadParameter(str(e))

    return HeuristicEvaluator(weights)


def resolve_depth(depth: Optional[int]) -> int:
    if depth is None:
        try:
            return get_search_depth()
        except ValueError as e:
            raise typer.BadParameter(str(e))

    if depth < 1:
        raise typer.BadParameter(f"Depth must be at least 1, got {depth}")

    return depth


def find_move() -> None:
    def command(
        input_file: Path,
        output_file: Path,
        depth: Optional[int] = typer.Option(None, "-d"),
        weights_file: Optional[Path] = typer.Option(None, "-w"),
        preset: Optional[str] = typer.Option(None, "-p"),
    ) -> None:
        evaluator = load_evaluator(weights_file, preset)

        try:
            FindMove(input_file, output_file, resolve_depth(depth), evaluator)()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    typer.run(command)


def self_play() -> None:
    def command(
        depth: Optional[int] = typer.Option(None, "-d"),
        weights_file: Optional[Path] = typer.Option(None, "-w"),
        preset: Optional[str] = typer.Option(None, "-p"),
    ) -> None:
        evaluator = load_evaluator(weights_file, preset)
        SelfPlay(resolve_depth(depth), evaluator)()

    typer.run(command)
