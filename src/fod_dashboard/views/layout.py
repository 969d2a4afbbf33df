from __future__ import annotations

from html import escape


def page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>"
        '<meta charset="utf-8">'
        f"<title>{escape(title)} | Moneyball Dynasty</title>"
        "</head>\n"
        f"<body>\n<main>\n{body}\n</main>\n</body>\n"
        "</html>\n"
    )
