from __future__ import annotations

from pathlib import Path

SAMPLE_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>My Amazing Page</title>
    <style>
        body { font-family: sans-serif; padding: 20px; }
        h1 { color: #3b82f6; }
    </style>
</head>
<body>
    <header>
        <h1>Welcome to My Site</h1>
        <p>Start editing this code to see the changes.</p>
    </header>
    <script>console.log("never counted");</script>
    <footer><p>&copy; 2024 My Company.</p></footer>
</body>
</html>
"""


def write_html_corpus(root: Path) -> Path:
    """Create a small corpus with HTML, text and an ignored stylesheet."""
    corpus_dir = root / "corpus"
    (corpus_dir / "blog").mkdir(parents=True)
    (corpus_dir / "index.html").write_text(SAMPLE_PAGE, encoding="utf-8")
    (corpus_dir / "blog" / "post.htm").write_text(
        "<p>The cat sat.</p>", encoding="utf-8"
    )
    (corpus_dir / "notes.txt").write_text("Plain notes here.", encoding="utf-8")
    (corpus_dir / "site.css").write_text("body { color: red; }", encoding="utf-8")
    return corpus_dir
