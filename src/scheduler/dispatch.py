# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

from scheduler import state as app_state
from scheduler.model.command import (
    CommandKind,
    CommandParams,
    CreateParams,
    CriteriaParams,
    DateParams,
    ListParams,
    ShowCalendarParams,
    ShowDateParams,
    UpdateParams,
)
from scheduler.model.criteria import Criteria
from scheduler.query.criteria import is_empty
from scheduler.query.listing import number_events
from scheduler.query.sort import limit_listing, sort_listing
from scheduler.repository.event import EVENT_REPO, EventRepository
from scheduler.service.calendar import calendar_listing, calendar_month
from scheduler.template.criteria import get_criteria_template
from scheduler.view.views import event as event_report

logger = logging.getLogger(__name__)

NO_CRITERIA_MESSAGE = "no criteria given, nothing changed"


def dispatch(
    kind: CommandKind,
    params: CommandParams,
    repository: Optional[EventRepository] = None,
) -> None:
    """Run one parsed command against the store and render its result."""
    repository = repository if repository is not None else EVENT_REPO
    logger.debug("dispatching %s", kind.value)

    match kind:
        case CommandKind.LIST:
            list_params = cast(ListParams, params)
            listed = number_events(repository.list_events())
            sort_by = list_params["sort_by"] or app_state.get_default_sort()
            if sort_by is not None:
                listed = sort_listing(listed, sort_by, list_params["descending"])
            event_report.events_view(
                "events", limit_listing(listed, list_params["limit"])
            )
        case CommandKind.SHOW_CALENDAR:
            calendar_params = cast(ShowCalendarParams, params)
            month = calendar_month(calendar_params["prev"], calendar_params["next"])
            event_report.calendar_view(
                month.format("MMMM YYYY"), calendar_listing(repository, month)
            )
        case CommandKind.SHOW_DATE:
            date_params = cast(ShowDateParams, params)
            events = repository.query_events(
                get_criteria_template(date=date_params["date"], time=date_params["time"])
            )
            event_report.date_view(
                date_params["date"], date_params["time"], number_events(events)
            )
        case CommandKind.EVENT_SHOW:
            criteria = cast(CriteriaParams, params)["criteria"]
            events = repository.query_events(criteria)
            event_report.events_view(
                "events", number_events(events), event_report.EVENT_COLUMNS
            )
        case CommandKind.EVENT_CREATE:
            event = cast(CreateParams, params)["event"]
            repository.save_new_event(event)
            event_report.summary_view(f"created event '{event['name']}'")
        case CommandKind.EVENT_UPDATE:
            update_params = cast(UpdateParams, params)
            if is_empty(update_params["criteria"]):
                event_report.summary_view(NO_CRITERIA_MESSAGE)
                return
            count = repository.update_events(
                update_params["criteria"], update_params["fields"]
            )
            event_report.summary_view(f"updated {count} event(s)")
        case CommandKind.EVENT_COMPLETE:
            criteria = _resolve_criteria(repository, cast(CriteriaParams, params))
            if is_empty(criteria):
                event_report.summary_view(NO_CRITERIA_MESSAGE)
                return
            count = repository.complete_events(criteria)
            event_report.summary_view(f"completed {count} event(s)")
        case CommandKind.EVENT_REMOVE:
            criteria = _resolve_criteria(repository, cast(CriteriaParams, params))
            if is_empty(criteria):
                event_report.summary_view(NO_CRITERIA_MESSAGE)
                return
            count = repository.delete_events(criteria)
            event_report.summary_view(f"removed {count} event(s)")
        case CommandKind.CLEAR_BY_DATE:
            date = cast(DateParams, params)["date"]
            count = repository.clear_completed(date)
            event_report.summary_view(f"cleared {count} completed event(s) on {date}")
        case CommandKind.COMPLETE_BY_DATE:
            date = cast(DateParams, params)["date"]
            count = repository.complete_all(date)
            event_report.summary_view(f"completed {count} event(s) on {date}")
        case CommandKind.DELETE_BY_DATE:
            date = cast(DateParams, params)["date"]
            count = repository.delete_all(date)
            event_report.summary_view(f"deleted {count} event(s) on {date}")


def _resolve_criteria(repository: EventRepository, params: CriteriaParams) -> Criteria:
    ordinal = params.get("ordinal")
    if ordinal is None:
        return params["criteria"]
    event = repository.get_event_by_ordinal(ordinal)
    criteria = params["criteria"].copy()
    criteria["name"] = event["name"]
    return criteria
