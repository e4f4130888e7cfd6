from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import html

from whiskey_browser.core.record import Whiskey
from whiskey_browser.core.selection import Selection
from whiskey_browser.core.sorting import SORTABLE_COLUMNS, SortDirection, SortState
from whiskey_browser.ui.helpers import COLUMN_HEADERS, records_frame
from whiskey_browser.ui.ids import IDs, row_select_id, sort_header_id


def _sort_indicator(column: str, sort: SortState) -> str:
    if column != sort.column:
        return " ↕"
    return " ↑" if sort.direction is SortDirection.ASC else " ↓"


def build_collection_table(
    records: Sequence[Whiskey],
    sort: SortState,
    selection: Selection,
) -> dbc.Table:
    """
    Render the visible records. `records` must already be filtered and sorted.
    """
    header_cells = [html.Th("")]
    for column in SORTABLE_COLUMNS:
        header_cells.append(
            html.Th(
                html.Button(
                    COLUMN_HEADERS[column] + _sort_indicator(column, sort),
                    id=sort_header_id(column),
                    n_clicks=0,
                    className="btn btn-link p-0 wb-sort-header",
                )
            )
        )

    frame = records_frame(records)
    body_rows = []
    for row in frame.to_dict("records"):
        record_id = row["id"]
        checked = record_id in selection
        body_rows.append(
            html.Tr(
                [
                    html.Td(
                        html.Button(
                            "☑" if checked else "☐",
                            id=row_select_id(record_id),
                            n_clicks=0,
                            className="btn btn-sm btn-link p-0 wb-row-select",
                        )
                    )
                ]
                + [html.Td(row[column]) for column in SORTABLE_COLUMNS],
                className="table-active" if checked else None,
            )
        )

    return dbc.Table(
        [html.Thead(html.Tr(header_cells)), html.Tbody(body_rows)],
        hover=True,
        striped=True,
        responsive=True,
        size="sm",
        className="align-middle",
    )


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Span(id=IDs.Panel.RESULT_SUMMARY, className="fw-semibold"),
                        html.Div(
                            [
                                html.Span(id=IDs.Panel.SELECTION_SUMMARY, className="text-muted me-3"),
                                dbc.Button(
                                    "☐ Select all",
                                    id=IDs.Control.SELECT_ALL,
                                    n_clicks=0,
                                    size="sm",
                                    color="secondary",
                                    outline=True,
                                ),
                            ],
                            className="d-flex align-items-center",
                        ),
                    ],
                    className="d-flex justify-content-between align-items-center",
                )
            ),
            dbc.CardBody(html.Div(id=IDs.Panel.TABLE_CONTAINER)),
        ],
        className="wb-table-card",
    )
