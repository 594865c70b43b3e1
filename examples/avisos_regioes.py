#!/usr/bin/env python3
"""
Avisos Agricolas por Regiao
===========================

Exemplo que consulta, em paralelo, chuva, irrigacao, geada e plantio
para algumas regioes da Espanha e monta um calendario de 5 dias.

Uso:
    python avisos_regioes.py
"""

from __future__ import annotations

import asyncio
from datetime import date, timedelta

from powerclima import agro
from powerclima.nasa_power import api

REGIOES = ["Andalucía", "Castilla y León", "Galicia", "Comunidad Valenciana"]


async def avisos(region: str) -> dict:
    """Coleta os quatro avisos de uma regiao."""
    try:
        chuva, irrigacao, geada, plantio = await asyncio.gather(
            api.is_raining(region),
            api.should_irrigate(region),
            api.frost_risk(region),
            api.planting_conditions(region),
        )
    except Exception as e:
        print(f"Erro ao coletar {region}: {e}")
        return {}

    return {
        "chuva": chuva,
        "irrigacao": irrigacao.reason,
        "geada": geada.message,
        "plantio": plantio.message,
    }


async def calendario(region: str, crop: str) -> agro.AgriculturalCalendar:
    """Calendario dos ultimos 5 dias com dados agroclimaticos completos."""
    fim = date.today()
    inicio = fim - timedelta(days=4)
    dados = await api.agricultural_data(region, inicio, fim)
    return agro.generate_agricultural_calendar(region, dados.weather_data, crop)


async def main():
    print("=" * 60)
    print("Avisos Agricolas - NASA POWER")
    print("=" * 60)

    resultados = await asyncio.gather(*[avisos(r) for r in REGIOES])

    for region, resultado in zip(REGIOES, resultados):
        print(f"\n--- {region} ---")
        for chave, valor in resultado.items():
            print(f"  {chave}: {valor}")

    print("\n" + "-" * 60)
    print("CALENDARIO (Andalucía, olivo)")
    print("-" * 60)

    cal = await calendario("Andalucía", "olivo")
    for dia in cal.next_days:
        print(f"  {dia.date}: {', '.join(dia.recommended_activities) or '-'}")
        print(f"    {dia.weather_summary}")


if __name__ == "__main__":
    asyncio.run(main())
