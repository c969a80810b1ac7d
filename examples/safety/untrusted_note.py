"""Render untrusted note text for an in-page preview.

Shows what happens to raw HTML, script URLs, and relative links when the
preview is hosted at a known origin.

Run::

    python examples/safety/untrusted_note.py

"""

import logging

from mdnote import Markdown

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

# Simulated user content (could come from storage, an import file, a form)
raw = """# Shopping <b>list</b>

- [store](/stores/42 "Nearest store")
- [trick](javascript:alert(1))
- <img src=x onerror="alert(1)">

> Remember: **milk** & _eggs_

```html
<script>alert("still just text")</script>
```
"""

md = Markdown(origin="https://notes.example")
print(md(raw))
