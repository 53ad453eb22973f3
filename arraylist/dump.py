"""Graphviz and HTML dumps of an ArrayList."""

from __future__ import annotations

import subprocess
from pathlib import Path

from arraylist.linkedlist import POISON, ArrayList


def _header(lst: ArrayList) -> str:
    return (
        f"head = {lst.head}\ntail = {lst.tail}\nfree = {lst.free}\n"
        f"size = {lst.size}\ncapacity = {lst.capacity}"
    )


def _node_lines(lst: ArrayList, i: int) -> list[str]:
    node = lst.nodes[i]
    color = "yellow" if node.value == POISON else "blue"
    lines = [
        f"\t {i} [shape = Mrecord; style = filled; fillcolor = pink2; color = {color}; "
        f'label = "{{ind = {i} | prev = {node.prev} | value = {node.value} | next = {node.next}}}"]'
    ]
    if node.prev == -1:
        lines.append(f"\t{i}->{node.next} [color = yellow]")
    elif lst.nodes[node.next].prev == i:
        lines.append(f"\t{i}->{node.next} [dir = none; color = sienna4]")
    else:
        lines.append(f"\t{i}->{node.prev} [color = red]")
        lines.append(f"\t{i}->{node.next} [color = green]")
    return lines


def graph_text(lst: ArrayList) -> str:
    """Return a dot description of every slot of ``lst``."""
    lines = ["digraph {", f'inf [shape = rect; color = blue; label = "{_header(lst)}"]']
    for i in range(lst.capacity):
        lines.extend(_node_lines(lst, i))
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_graph(lst: ArrayList, path) -> None:
    Path(path).write_text(graph_text(lst))


def render_png(graph_path, png_path) -> int:
    """Run ``dot`` to turn the graph file into a PNG; return its exit status."""
    command = ["dot", str(graph_path), "-T", "png", "-o", str(png_path)]
    print(" ".join(command))
    try:
        return subprocess.run(command, check=False).returncode
    except FileNotFoundError:
        return 127


def html_text(lst: ArrayList, png_path) -> str:
    """Return an HTML page listing every slot and showing the picture."""
    parts = [
        "<pre>\n",
        f"<h3> LIST {hex(id(lst))} DUMP </h3>\n",
        _header(lst) + "\n\n",
        "<h4> prev:\tvalue:\t\tnext:\t </h4> \n",
    ]
    parts.extend(f"{n.prev}\t{n.value:>10}\t{n.next}\n" for n in lst.nodes)
    parts.append(f"<h2> IMAGE: </h2> \n<img src = {png_path} width = 500px> \n")
    return "".join(parts)


def write_html(lst: ArrayList, png_path, path) -> None:
    Path(path).write_text(html_text(lst, png_path))


def dump(lst: ArrayList, graph_path, html_path, png_path) -> None:
    """Write the graph file, render it to PNG and write the HTML page."""
    write_graph(lst, graph_path)
    Path(png_path).parent.mkdir(parents=True, exist_ok=True)
    render_png(graph_path, png_path)
    write_html(lst, png_path, html_path)