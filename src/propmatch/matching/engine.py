"""
Motor de matching entre clientes y propiedades.

Implementa:
- Batch: score de todos los pares cliente x propiedad
- Por cliente: propiedades ordenadas por score
- Por propiedad: clientes ordenados por score

El llamador se encarga de traer los candidatos de la base; el motor
solo puntúa, filtra por score mínimo, ordena y corta.
"""

from collections.abc import Iterable
from typing import Optional

import structlog

from propmatch.models import MatchResult
from propmatch.matching.calculator import (
    ClientInput,
    MatchCalculator,
    PropertyInput,
    coerce_client,
    coerce_property,
)

logger = structlog.get_logger()


class MatchingEngine:
    """
    Motor de matching sobre un MatchCalculator.

    Flujo para un cliente:
    1. Calcular el score contra cada propiedad candidata
    2. Filtrar por score mínimo
    3. Ordenar por score descendente
    4. Cortar en `limit`
    """

    def __init__(self, calculator: Optional[MatchCalculator] = None):
        self.calculator = calculator or MatchCalculator()

    def calculate(self, client: ClientInput, property: PropertyInput) -> MatchResult:
        return self.calculator.calculate(client, property)

    def calculate_batch_matches(
        self,
        clients: Iterable[ClientInput],
        properties: Iterable[PropertyInput],
    ) -> list[MatchResult]:
        """Score de todos los pares cliente x propiedad."""
        clients = [coerce_client(c) for c in clients]
        properties = [coerce_property(p) for p in properties]

        results = [
            self.calculator.calculate(client, property)
            for client in clients
            for property in properties
        ]

        logger.debug(
            "Batch de matching calculado",
            clients=len(clients),
            properties=len(properties),
            results=len(results),
        )
        return results

    def find_matching_properties(
        self,
        client: ClientInput,
        properties: Iterable[PropertyInput],
        min_score: float = 0,
        limit: Optional[int] = None,
    ) -> list[MatchResult]:
        """
        Encuentra las propiedades que mejor matchean con un cliente.

        Args:
            client: Cliente a evaluar
            properties: Propiedades candidatas
            min_score: Score mínimo (0-100)
            limit: Máximo de resultados (None = todos)

        Returns:
            Lista de MatchResult ordenados por score
        """
        client = coerce_client(client)
        results = [self.calculator.calculate(client, p) for p in properties]
        matches = self.rank(results, min_score, limit)

        logger.info(
            "Propiedades matcheadas",
            client_id=client.id,
            evaluated=len(results),
            returned=len(matches),
        )
        return matches

    def find_matching_clients(
        self,
        property: PropertyInput,
        clients: Iterable[ClientInput],
        min_score: float = 0,
        limit: Optional[int] = None,
    ) -> list[MatchResult]:
        """Encuentra los clientes que mejor matchean con una propiedad."""
        property = coerce_property(property)
        results = [self.calculator.calculate(c, property) for c in clients]
        matches = self.rank(results, min_score, limit)

        logger.info(
            "Clientes matcheados",
            property_id=property.id,
            evaluated=len(results),
            returned=len(matches),
        )
        return matches

    @staticmethod
    def rank(
        results: list[MatchResult],
        min_score: float,
        limit: Optional[int],
    ) -> list[MatchResult]:
        matches = [r for r in results if r.score >= min_score]
        # Ordenar por score final
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches[:limit] if limit else matches


def calculate_batch_matches(
    clients: Iterable[ClientInput],
    properties: Iterable[PropertyInput],
) -> list[MatchResult]:
    return MatchingEngine().calculate_batch_matches(clients, properties)


def find_matching_properties(
    client: ClientInput,
    properties: Iterable[PropertyInput],
    min_score: float = 0,
    limit: Optional[int] = None,
) -> list[MatchResult]:
    return MatchingEngine().find_matching_properties(client, properties, min_score, limit)


def find_matching_clients(
    property: PropertyInput,
    clients: Iterable[ClientInput],
    min_score: float = 0,
    limit: Optional[int] = None,
) -> list[MatchResult]:
    return MatchingEngine().find_matching_clients(property, clients, min_score, limit)
