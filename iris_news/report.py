"""Terminal and JSON rendering of the news items."""
import json
from typing import List, Optional, Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from iris_news.ingestion.models import NewsItem


PAGE_TITLE = "IRIS News Content"
DATE_LABEL = "取得日"
READ_MORE_LABEL = "元記事を読む →"
NOT_FOUND_MESSAGE = "ニュースが見つかりませんでした"


def item_panel(item: NewsItem) -> Panel:
    body = []
    if item.date:
        body.append(Text(f"{DATE_LABEL}: {item.date}", style="dim"))
    body.append(Text(item.content))
    if item.link:
        body.append(Text(READ_MORE_LABEL, style=f"blue link {item.link}"))

    title = Text(item.title, style="bold blue")
    if item.link:
        title.stylize(f"link {item.link}")
    return Panel(Group(*body), title=title, title_align="left", border_style="grey50")


def render_items(items: Sequence[NewsItem], console: Optional[Console] = None) -> None:
    """Print every item, or an explicit not-found line for an empty list."""
    console = console or Console()
    console.rule(Text(PAGE_TITLE, style="bold"))
    for item in items:
        console.print(item_panel(item))
    if not items:
        console.print(Text(NOT_FOUND_MESSAGE, style="dim"), justify="center")


def render_json(items: Sequence[NewsItem]) -> str:
    records: List[dict] = [item.to_record() for item in items]
    return json.dumps(records, ensure_ascii=False, indent=2)
