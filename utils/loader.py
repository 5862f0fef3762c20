"""
Module used to import parties from JSON files

A party file maps each guest id to the ids they know:
    {"1": [2, 3], "2": [3], "3": []}
"""

import json
import logging
import os

from constants import DATA
from localtypes import PartyData, Person
from party import party_from_pairs, strangers

logger = logging.getLogger(__name__)


def resolve_party_path(path: str) -> str:
    """The path as given if it exists, otherwise relative to DATA."""
    if os.path.exists(path):
        return path
    return os.path.join(DATA, path)


def path_to_party_data(path: str) -> PartyData:
    """
    Read the raw JSON of a party file.

    Raises:
        ValueError: If the file is not valid JSON.
    """
    with open(resolve_party_path(path), "r", encoding="utf-8") as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error: {path} is not valid JSON: {e}") from e
    return data


def party_data_to_party(data: PartyData, name: str = "<data>") -> frozenset[Person]:
    """
    Validate raw party data and build the party.

    Raises:
        ValueError: If the data is not an object of id -> list of ids,
            or if two keys name the same id.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Error: party in {name} is not a JSON object")

    pairs = []
    for key, known in data.items():
        try:
            person_id = int(key)
        except ValueError:
            raise ValueError(
                f"Error: person id {key!r} in {name} is not an integer"
            ) from None
        if not isinstance(known, list) or not all(
            isinstance(k, int) and not isinstance(k, bool) for k in known
        ):
            raise ValueError(
                f"Error: acquaintances of {key!r} in {name} are not a list of ids"
            )
        pairs.append((person_id, known))

    try:
        party = party_from_pairs(pairs)
    except ValueError as e:
        # "1" and "01" are the same id
        raise ValueError(f"Error: {name}: {e}") from e

    unknown = strangers(party)
    if unknown:
        logger.info(f"Ignoring acquaintances not at the party: {sorted(unknown)}")
    return party


def load_party(path: str) -> frozenset[Person]:
    """Load a party file, looked up as given first, then under DATA."""
    return party_data_to_party(path_to_party_data(path), path)
