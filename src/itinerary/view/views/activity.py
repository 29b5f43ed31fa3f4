# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from itinerary.color import (
    HOUR_LABEL_COLOR,
    PAST_ACTIVITY_COLOR,
    UPCOMING_ACTIVITY_COLOR,
)
from itinerary.model.activity import ActivityItem, DaySection
from itinerary.view.views.header import header

NO_ACTIVITY_TEXT = "Nenhuma atividade cadastrada nessa data"


def render_section_header(section: DaySection) -> Text:
    line = Text()
    line.append(f"Dia {section['day_number']}  ", style="bold")
    line.append(section["day_name"].capitalize(), style="bright_black")
    return line


def render_activity(activity: ActivityItem) -> Text:
    color = PAST_ACTIVITY_COLOR if activity["is_past"] else UPCOMING_ACTIVITY_COLOR
    marker = "✓" if activity["is_past"] else "○"

    line = Text()
    line.append(f"{marker} ", style=color)
    line.append(activity["title"], style=color)
    line.append(
        f"  {activity['hour_label']}",
        style=PAST_ACTIVITY_COLOR if activity["is_past"] else HOUR_LABEL_COLOR,
    )
    return line


def activities_view(sections: list[DaySection], trip_when: Optional[str] = None) -> None:
    header("atividades", trip_when)

    console = Console()
    for section in sections:
        console.print()
        console.print(Padding(render_section_header(section), (0, 1)))
        if len(section["activities"]) == 0:
            console.print(
                Padding(f"[bright_black]{NO_ACTIVITY_TEXT}[/bright_black]", (0, 3))
            )
            continue
        for activity in section["activities"]:
            console.print(Padding(render_activity(activity), (0, 3)))
    console.print()
