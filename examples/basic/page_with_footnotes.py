"""Build a small page with footnotes and a linked stylesheet."""

from notula import StringBuilder, View, footnote_scope

view = View(base_url="/static")
body = StringBuilder()

with footnote_scope(body, view=view) as notes:
    body.append_line(
        f"<p>This page uses the {notes.add('Notula library', 'Notula renders accessible footnotes.')}.</p>"
    )
    body.append_line(
        f"<p>References are numbered by {notes.add('CSS counters', '<code>counter-increment</code> on each reference.', {'encode_footnote': False})}.</p>"
    )

page = f"<html><head>{view.render_head()}</head><body>\n{body.build()}</body></html>"
print(page)
