# arraylist

A doubly linked list kept inside one growable array of slots. Slot 0 is a
sentinel. Its `next` points at the head and its `prev` points at the tail.
Free slots form their own chain through `next`, starting at `free`. When the
last free slot is taken, the array doubles in size.

The list can be written out as a Graphviz graph and rendered to PNG with `dot`.
It can also be described in an HTML page that lists every slot and embeds the
picture.

## Install

```
pip install .
```

Rendering pictures needs the Graphviz `dot` program on your `PATH`. If `dot`
is missing, `render_png` returns 127 and no picture is written.

## Library use

```python
from arraylist.linkedlist import ArrayList, ListError
from arraylist.dump import graph_text, html_text, dump

lst = ArrayList(1)
first = lst.insert(0, 10)       # insert after the sentinel; returns the new slot
second = lst.insert(first, 20)  # insert after slot `first`
print(lst.values(), len(lst), lst.head, lst.tail, lst.capacity)

lst.delete(first)

try:
    lst.delete(0)               # the sentinel cannot be deleted
except ListError as err:
    print(err)

print(graph_text(lst))          # Graphviz source describing every slot
dump(lst, "graph.txt", "my.html", "pictures/list.png")
```

### `arraylist.linkedlist`

- `ArrayList(capacity=1)` creates a list with `capacity` usable slots plus the
  sentinel. A capacity below 1 raises `ValueError`.
- `insert(index, value)` places `value` after the node in slot `index` and
  returns the slot it went into. It raises `ListError` if `index` is out of
  range or names a free slot.
- `delete(index)` frees slot `index`. It raises `ListError` for slot 0, for an
  out-of-range index, or for a slot that is already free.
- `values()` and iteration give the values from head to tail. `len()` gives
  the number of stored values.
- `head`, `tail`, `capacity`, `size`, `free` and `nodes` (a list of `Node`
  objects, each with `prev`, `next` and `value`) expose the internal layout.

### `arraylist.dump`

- `graph_text(lst)` and `write_graph(lst, path)` produce the dot description.
- `render_png(graph_path, png_path)` runs `dot`, prints the command it runs,
  and returns the exit status.
- `html_text(lst, png_path)` and `write_html(lst, png_path, path)` produce the
  HTML page.
- `dump(lst, graph_path, html_path, png_path)` writes the graph, creates the
  picture's directory, renders the PNG, and writes the HTML page.

## Command line

```
arraylist [--capacity N] [--graph graph.txt] [--html my.html] [--png PATH]
```

The command reads commands from standard input, one per line:

- `i <index> <value>` inserts `value` after slot `index`.
- `d <index> <number>` deletes slot `index`. The number is required but is
  ignored.

Reading stops at the first line that is not of this form, such as `q`, or at a
line whose first character is `q` followed by two numbers. A rejected insert or
delete prints the error and reading continues. Any other letter prints
`Try again.`

Afterwards the command writes the graph file and the HTML page and renders the
picture with `dot`. If `--png` is not given, it asks for an output name and
reads the first word of the next input line, cut to 9 characters. The picture
is then written to `pictures/<name>.png`.