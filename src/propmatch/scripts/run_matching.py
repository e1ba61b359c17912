"""
Script para calcular matches entre clientes y propiedades.

Lee exports JSON (arrays de objetos) del CRM y escribe los resultados
como JSON en stdout. Los logs van a stderr.

Uso:
    python -m propmatch.scripts.run_matching --clients clients.json --properties properties.json
    python -m propmatch.scripts.run_matching ... --client-id c-1 --limit 10
    python -m propmatch.scripts.run_matching ... --property-id p-7 --min-score 70
    python -m propmatch.scripts.run_matching ... --analytics
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from propmatch.config import get_settings
from propmatch.log import configure_logging
from propmatch.matching import MatchingEngine, build_match_analytics, get_match_summary_stats

logger = structlog.get_logger()


def load_records(path: Path) -> list[dict]:
    """Carga un array JSON de registros."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        # Export con envoltorio: {"clients": [...]} / {"properties": [...]}
        data = next((v for v in data.values() if isinstance(v, list)), [])
    if not isinstance(data, list):
        raise ValueError(f"{path} no contiene un array de registros")
    return data


def _find(records: list[dict], record_id: str) -> Optional[dict]:
    return next((r for r in records if str(r.get("id")) == record_id), None)


def run_matching(
    clients: list[dict],
    properties: list[dict],
    client_id: Optional[str] = None,
    property_id: Optional[str] = None,
    min_score: float = 0,
    limit: Optional[int] = None,
    analytics: bool = False,
) -> Any:
    """
    Ejecuta el modo pedido y devuelve un objeto serializable.

    Raises:
        LookupError: Si el cliente / propiedad pedido no existe
    """
    engine = MatchingEngine()

    if analytics:
        result = build_match_analytics(clients, properties, engine=engine)
        return {
            "analytics": result.model_dump(mode="json"),
            "summary": get_match_summary_stats(result).model_dump(mode="json"),
        }

    if client_id:
        client = _find(clients, client_id)
        if client is None:
            raise LookupError(f"Cliente no encontrado: {client_id}")
        matches = engine.find_matching_properties(client, properties, min_score, limit)
    elif property_id:
        property = _find(properties, property_id)
        if property is None:
            raise LookupError(f"Propiedad no encontrada: {property_id}")
        matches = engine.find_matching_clients(property, clients, min_score, limit)
    else:
        matches = engine.calculate_batch_matches(clients, properties)
        matches = engine.rank(matches, min_score, limit)

    return [m.model_dump(mode="json") for m in matches]


def main():
    """Entry point del script."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Calcular matches cliente-propiedad")
    parser.add_argument("--clients", type=Path, required=True, help="JSON con clientes")
    parser.add_argument("--properties", type=Path, required=True, help="JSON con propiedades")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--client-id", help="Propiedades para un cliente")
    target.add_argument("--property-id", help="Clientes para una propiedad")
    target.add_argument("--analytics", action="store_true", help="Analytics del dashboard")
    parser.add_argument(
        "--min-score",
        type=float,
        default=settings.default_min_match_score,
        help=f"Score mínimo (default: {settings.default_min_match_score})",
    )
    parser.add_argument("--limit", type=int, default=None, help="Máximo de resultados")
    parser.add_argument("--log-level", default=None, help="Nivel de log (default: LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    logger.info("Iniciando matching...")

    try:
        clients = load_records(args.clients)
        properties = load_records(args.properties)

        output = run_matching(
            clients,
            properties,
            client_id=args.client_id,
            property_id=args.property_id,
            min_score=args.min_score,
            limit=args.limit,
            analytics=args.analytics,
        )

        json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")

        logger.info(
            "Matching completado",
            clients=len(clients),
            properties=len(properties),
        )
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
