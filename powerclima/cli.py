"""CLI do powerclima usando Typer."""

from __future__ import annotations

import asyncio

import pandas as pd
import typer

from powerclima import __version__, constants
from powerclima.utils.logging import configure_logging

app = typer.Typer(
    name="powerclima",
    help="Dados meteorologicos NASA POWER e avisos agricolas para regioes da Espanha",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"powerclima version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Mostra a versao e sai",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Logs de debug no stderr"),
) -> None:
    """powerclima - Clima diario NASA POWER para a Espanha."""
    configure_logging(level="DEBUG" if verbose else "WARNING", json_format=False)


def _echo_frame(df: pd.DataFrame, formato: str) -> None:
    if df.empty:
        typer.echo("Nenhum dado encontrado")
        return

    if formato == "json":
        typer.echo(df.to_json(orient="records", indent=2, date_format="iso"))
    elif formato == "csv":
        typer.echo(df.to_csv(index=False))
    else:
        typer.echo(df.to_string(index=False))


@app.command("regiones")
def regiones() -> None:
    """Lista regioes disponiveis e suas coordenadas."""
    from powerclima.nasa_power.models import REGION_COORDS

    typer.echo("Regioes disponiveis:")
    for region, coords in REGION_COORDS.items():
        typer.echo(f"  - {region.value} ({coords.latitude}, {coords.longitude})")


@app.command("clima")
def clima(
    region: str = typer.Argument(..., help="Regiao (ex: Madrid, Andalucía)"),
    inicio: str = typer.Option(..., "--inicio", "-i", help="Data inicio (YYYY-MM-DD ou YYYYMMDD)"),
    fim: str = typer.Option(..., "--fim", "-f", help="Data fim (YYYY-MM-DD ou YYYYMMDD)"),
    mensal: bool = typer.Option(False, "--mensal", "-m", help="Agrega por mes"),
    formato: str = typer.Option("table", "--formato", "-o", help="Formato: table, csv, json"),
) -> None:
    """Consulta dados meteorologicos diarios de uma regiao."""
    from powerclima.nasa_power import api

    try:
        coordinates = api.region_coordinates(region)
        df = asyncio.run(
            api.weather_frame(
                coordinates,
                inicio,
                fim,
                aggregation="monthly" if mensal else "daily",
            )
        )
        _echo_frame(df, formato)

    except Exception as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(1) from None


@app.command("chuva")
def chuva(
    region: str = typer.Argument(..., help="Regiao"),
) -> None:
    """Indica se esta chovendo hoje na regiao."""
    from powerclima.nasa_power import api

    try:
        raining = asyncio.run(api.is_raining(region))
    except Exception as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo("Sí, está lloviendo." if raining else "No está lloviendo.")


@app.command("irrigacao")
def irrigacao(
    region: str = typer.Argument(..., help="Regiao"),
) -> None:
    """Avalia necessidade de irrigacao."""
    from powerclima.nasa_power import api

    try:
        advice = asyncio.run(api.should_irrigate(region))
    except Exception as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Regar: {advice.should_irrigate}")
    typer.echo(f"Razón: {advice.reason}")
    if advice.recommended_amount is not None:
        typer.echo(f"Cantidad recomendada: {advice.recommended_amount} mm")


@app.command("geada")
def geada(
    region: str = typer.Argument(..., help="Regiao"),
) -> None:
    """Avalia risco de geada para hoje e amanha."""
    from powerclima.nasa_power import api

    try:
        advice = asyncio.run(api.frost_risk(region))
    except Exception as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Riesgo: {advice.risk_level}")
    typer.echo(advice.message)


@app.command("plantio")
def plantio(
    region: str = typer.Argument(..., help="Regiao"),
) -> None:
    """Verifica condicoes de plantio."""
    from powerclima.nasa_power import api

    try:
        advice = asyncio.run(api.planting_conditions(region))
    except Exception as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Óptimo: {advice.is_optimal}")
    typer.echo(advice.message)


@app.command("agro")
def agro(
    region: str = typer.Argument(..., help="Regiao"),
    inicio: str = typer.Option(..., "--inicio", "-i", help="Data inicio"),
    fim: str = typer.Option(..., "--fim", "-f", help="Data fim"),
    formato: str = typer.Option("table", "--formato", "-o", help="Formato: table, json"),
) -> None:
    """Indices agroclimaticos e recomendacoes por dia."""
    from powerclima.nasa_power import api

    try:
        data = asyncio.run(api.agricultural_data(region, inicio, fim))
    except Exception as e:
        typer.echo(f"Erro: {e}", err=True)
        raise typer.Exit(1) from None

    if formato == "json":
        typer.echo(data.model_dump_json(indent=2))
        return

    rows = [
        {
            "date": record.date,
            **{k: str(v) for k, v in indices.model_dump().items()},
            "irrigation": recs.irrigation.message,
        }
        for record, indices, recs in zip(
            data.weather_data, data.indices, data.recommendations
        )
    ]
    _echo_frame(pd.DataFrame(rows), formato)


config_app = typer.Typer(help="Configuracoes")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show() -> None:
    """Mostra configuracoes atuais."""
    typer.echo("=== HTTP Settings ===")
    http = constants.HTTPSettings()
    typer.echo(f"  base_url: {http.base_url}")
    typer.echo(f"  community: {http.community}")
    typer.echo(f"  timeout_read: {http.timeout_read}s")


if __name__ == "__main__":
    app()
