# restview

Building blocks for a REST response viewer, free of any GUI toolkit.

## Modules

- `restview.codepoints` – the `FontAwesome` enumeration (an `IntEnum`) of
  icon-font code points, some names being aliases of others (`GEAR` and
  `COG`). `codepoint(name)` looks one up, ignoring case, treating dashes and
  underscores alike and dropping an `icon-` prefix; an unknown name raises
  `KeyError`.
- `restview.iconnames` – the icon names registered with the icon factory,
  spelled exactly as registered (`"arrow-left"`, `"cog"`, `"mail_reply"`,
  ...). `named_codepoints()` returns a fresh dict of them; `lookup(name)`
  matches verbatim and raises `KeyError` for an unregistered name.
- `restview.awesome` – the icon factory `Awesome`, and `instance()`, a shared
  factory set up for Font Awesome with black icons (white when active or
  selected). `Awesome.icon` takes a code point or a registered name and
  returns an `Icon`, or `None` for a name that is neither registered nor
  given a painter with `give`. Default options (`color`, `color-disabled`,
  `color-active`, `color-selected`, `scale-factor`, `text`, ...) are laid
  under per-icon options with `merge_options`. `Icon.render(height, mode)`
  asks the icon's `IconPainter`; the built-in `CharIconPainter` returns a
  dict with the glyph `text`, its `color` for the given `IconMode`, and a
  `Font` sized `height × scale-factor` pixels.
- `restview.dicteditor` – `DictEditorModel`, an ordered two-column
  key/value table (keys may repeat), such as one for request headers.
  `key`, `value` and `remove` raise `IndexError` for a missing row.
- `restview.domitem` – `DomItem`, a lazily built, cached tree of items over
  the nodes of an `xml.dom.minidom` document.
- `restview.dommodel` – `DomModel`, a three-column tree model (Name,
  Attributes, Value) over an XML document, addressed through `ModelIndex`
  values and queried by `Role` (`DISPLAY`, `FONT`, `TEXT_COLOR`).
  `load_xml` drops whitespace-only text and returns `False`, leaving an
  empty document, when the XML is not well formed.

## Installation

```
pip install .
```

## Example

```python
from restview.awesome import instance, IconMode
from restview.dicteditor import DictEditorModel
from restview.dommodel import DomModel, ModelIndex, Role

icon = instance().icon("refresh")
print(icon.render(16, IconMode.NORMAL))

headers = DictEditorModel()
headers.insert("Content-Type", "application/json;charset=UTF-8")
print(headers.key(0), headers.value(0))

model = DomModel()
model.load_xml(b'<root><item id="1">text</item></root>')
top = model.index(0, 0, ModelIndex())
print(model.data(top, Role.DISPLAY))  # root
```

## What it does not do

The package holds models only. It sends no HTTP requests, shows no window
and draws no pixels (icons are described, not rasterised), keeps no history
or favourites on disk, and has no command to run.

## Running the tests

```
pip install ".[test]"
pytest
```