"""Command-line entrypoints for SimpChem."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, NoReturn

import typer

from simpchem.analyzer import AnalyzerOptions, ReactionAnalyzer, get_reaction_info
from simpchem.balancer import balance_equation, explain_balancing_steps
from simpchem.constants import STANDARD_PRESSURE, STANDARD_TEMPERATURE
from simpchem.properties import get_gas_volume, get_hydrocarbon_name, get_molecular_weight

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


def _emit(payload: Dict[str, Any], output: Path | None = None) -> None:
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)
    if output:
        with open(output, "w") as f:
            f.write(json_output)


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _parse_options(data: Dict[str, Any]) -> AnalyzerOptions:
    if not isinstance(data, dict):
        raise ValueError(f"Options must be an object, got {type(data).__name__}")
    unknown = set(data) - {"is_concentrated", "handler_order"}
    if unknown:
        raise ValueError(f"Unknown option: {', '.join(sorted(unknown))}")
    return AnalyzerOptions.from_mapping(data)


def _parse_reactions(data: Any) -> list:
    if not isinstance(data, list) or not all(isinstance(r, str) for r in data):
        raise ValueError("'reactions' must be a list of reaction strings")
    return data


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option(help="Logging level (DEBUG, INFO, WARNING, ERROR).")
    ] = "WARNING",
) -> None:
    """Classify compounds, predict reactions and balance equations."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def classify(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. H2SO4.")],
) -> None:
    """Identify the compound family of a formula."""
    _emit(ReactionAnalyzer().get_compound_info(formula).to_dict())


@app.command()
def react(
    first: Annotated[str, typer.Argument(help="First reactant.")],
    second: Annotated[str, typer.Argument(help="Second reactant.")],
    concentrated: Annotated[
        bool, typer.Option("--concentrated", help="Treat oxidizing acids as concentrated.")
    ] = False,
) -> None:
    """Check whether two reactants react and predict the products."""
    info = get_reaction_info(first, second, concentrated)
    _emit(
        {
            "reactants": [first, second],
            "possible": info is not None,
            "info": info.to_dict() if info else None,
        }
    )


@app.command()
def analyze(
    reaction: Annotated[str, typer.Argument(help='Reaction such as "HCl + NaOH -> ?".')],
    concentrated: Annotated[
        bool, typer.Option("--concentrated", help="Treat oxidizing acids as concentrated.")
    ] = False,
) -> None:
    """Analyze a full reaction string."""
    analyzer = ReactionAnalyzer(AnalyzerOptions(is_concentrated=concentrated))
    _emit(analyzer.analyze_reaction(reaction).to_dict())


@app.command()
def balance(
    reaction: Annotated[str, typer.Argument(help='Reaction such as "CH4 + O2 -> CO2 + H2O".')],
    explain: Annotated[
        bool, typer.Option("--explain", help="Include the intermediate balancing steps.")
    ] = False,
) -> None:
    """Balance a chemical equation with the smallest integer coefficients."""
    balanced = balance_equation(reaction)
    payload: Dict[str, Any] = {"reaction": reaction, "balanced": balanced}
    if explain:
        payload["steps"] = explain_balancing_steps(reaction)
    _emit(payload)
    if balanced is None:
        raise typer.Exit(code=1)


@app.command()
def weight(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. Ca(OH)2.")],
) -> None:
    """Molecular weight in g/mol."""
    try:
        molecular_weight = get_molecular_weight(formula)
    except ValueError as exc:
        _fail(exc)
    _emit(
        {
            "formula": formula,
            "name": get_hydrocarbon_name(formula),
            "molecular_weight": round(molecular_weight, 4),
        }
    )


@app.command("gas-volume")
def gas_volume(
    moles: Annotated[float, typer.Option(help="Amount of gas (mol).")] = 1.0,
    temperature: Annotated[float, typer.Option(help="Temperature (K).")] = STANDARD_TEMPERATURE,
    pressure: Annotated[float, typer.Option(help="Pressure (atm).")] = STANDARD_PRESSURE,
) -> None:
    """Ideal gas volume in litres."""
    try:
        volume = get_gas_volume(moles, temperature, pressure)
    except ValueError as exc:
        _fail(exc)
    _emit({"moles": moles, "temperature": temperature, "pressure": pressure, "volume": volume})


@app.command()
def run(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON configuration file.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Analyze a batch of reactions from a config file."""
    with open(config_file, "r") as f:
        config = json.load(f)

    try:
        options = _parse_options(config.get("options", {}))
        reactions = _parse_reactions(config.get("reactions"))
    except ValueError as exc:
        _fail(exc)

    include_balanced = bool(config.get("balance", False))
    analyzer = ReactionAnalyzer(options)
    results = []
    for reaction in reactions:
        entry = analyzer.analyze_reaction(reaction).to_dict()
        entry["reaction"] = reaction
        if include_balanced:
            entry["balanced"] = balance_equation(reaction)
        results.append(entry)
    logger.info("Analyzed %d reactions from %s", len(results), config_file)

    _emit(
        {
            "options": {
                "is_concentrated": options.is_concentrated,
                "handler_order": [domain.value for domain in options.handler_order],
            },
            "results": results,
        },
        output,
    )
