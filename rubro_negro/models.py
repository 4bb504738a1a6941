"""Domain records: cities, people and states, with name comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rubro_negro.date import Date


def _sign(left: str, right: str) -> int:
    return (left > right) - (left < right)


@dataclass
class City:
    """A city with its population and an optional tree of postal codes."""

    name: str
    population: int = 0
    cep_tree: Any = None

    def describe(self) -> str:
        """Return the city's printable description."""
        return (
            f"Nome da Cidade: {self.name}\n"
            f"Quantidade de Populacao: {self.population}"
        )


@dataclass
class Person:
    """A person identified by CPF, with birth and current postal codes."""

    cpf: str
    name: str
    birth_cep: str = ""
    current_cep: str = ""
    birth_date: Date | None = None

    def describe(self) -> str:
        """Return the person's printable description."""
        lines = [
            f"CPF: {self.cpf}",
            f"Nome: {self.name}",
            f"CEP Natal: {self.birth_cep}",
            f"CEP Atual: {self.current_cep}",
        ]
        if self.birth_date is not None:
            lines.append(f"Data: {self.birth_date.format()}")
        return "\n".join(lines)


@dataclass
class State:
    """A state with its capital, city count, population and city tree."""

    name: str
    capital: str = ""
    city_count: int = 0
    population: int = 0
    city_tree: Any = None

    def describe(self) -> str:
        """Return the state's printable description."""
        return (
            f"Nome do Estado: {self.name}\n"
            f"Nome da Capital: {self.capital}\n"
            f"Quantidade de Cidades: {self.city_count}\n"
            f"Quantidade de Populacao: {self.population}"
        )


def compare_city_names(city1: City, city2: City) -> int:
    """Compare two cities by name: negative, zero or positive."""
    return _sign(city1.name, city2.name)


def compare_person_names(person1: Person, person2: Person) -> int:
    """Compare two people by name: negative, zero or positive."""
    return _sign(person1.name, person2.name)


def compare_state_names(state1: State | None, state2: State | None) -> int:
    """Compare two states by name; a missing state compares as equal."""
    if state1 is None or state2 is None:
        return 0
    return _sign(state1.name, state2.name)


def print_city(city: City | None) -> None:
    """Print the city's description; print nothing for None."""
    if city is not None:
        print(city.describe())


def print_person(person: Person | None) -> None:
    """Print the person's description; print nothing for None."""
    if person is not None:
        print(person.describe())


def print_state(state: State | None) -> None:
    """Print the state's description; print nothing for None."""
    if state is not None:
        print(state.describe())