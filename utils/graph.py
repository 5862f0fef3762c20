"""
Functions related to graphs: acquaintance digraphs and Graphviz export.
"""

import logging
import subprocess
from collections.abc import Set
from pathlib import Path

from constants import HIGHLIGHT_COLOR
from localtypes import Digraph, Party, PersonId

logger = logging.getLogger(__name__)


def party_to_digraph(party: Party) -> Digraph:
    """
    Turn a party into an adjacency mapping.

    Every guest is a node. An edge a -> b means a knows b; edges towards
    people who are not at the party are dropped, as are self loops.
    """
    present = {person.id for person in party}
    return {
        person.id: frozenset(person.known_people & present) for person in party
    }


def digraph_to_dot(
    digraph: Digraph, highlight: Set[PersonId] = frozenset()
) -> str:
    """
    Render a digraph in the Graphviz DOT language.

    Nodes and edges are emitted in ascending id order so the output is
    stable. Nodes in `highlight` are filled.
    """
    lines = ["digraph {"]
    for node in sorted(digraph):
        if node in highlight:
            lines.append(
                f'    {node} [ label = "{node}" style = filled fillcolor = {HIGHLIGHT_COLOR} ]'
            )
        else:
            lines.append(f'    {node} [ label = "{node}" ]')
    for node in sorted(digraph):
        for target in sorted(digraph[node]):
            lines.append(f"    {node} -> {target} [ ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(dot: str, path: str | Path) -> Path:
    """Write DOT text to `path`, creating parent directories if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dot)
    logger.debug(f"Wrote {path}")
    return path


def render_png(dot_path: str | Path, png_path: str | Path) -> bool:
    """
    Convert a DOT file to PNG with the Graphviz `dot` executable.

    Returns:
        True on success. Failures are logged, never raised.
    """
    try:
        result = subprocess.run(
            ["dot", "-Tpng", str(dot_path), "-o", str(png_path)],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        logger.error("Graphviz `dot` executable not found, skipping PNG")
        return False

    if result.returncode != 0:
        logger.error(f"Conversion failed:\n{result.stderr}")
        return False

    logger.debug(f"Rendered {png_path}")
    return True
