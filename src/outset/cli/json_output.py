"""JSON output models for machine-parseable command output."""

import json
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

from outset.cli.output import machine_output


class RunRecordEntry(BaseModel):
    """One once-item from the run-record.

    Attributes:
        path: Item path as recorded
        last_run: UTC completion time of the last successful run
        override: Pending override time, if any
        next_login: What the next once-mode run will do with the item
    """

    model_config = ConfigDict(strict=True)

    path: str
    last_run: datetime
    override: datetime | None = None
    next_login: Literal["skip", "override"]


class StatusResponse(BaseModel):
    """Pydantic model for `outset status --json`."""

    model_config = ConfigDict(strict=True)

    run_once_file: str
    user: str
    entries: list[RunRecordEntry]


def emit_model(model: BaseModel) -> None:
    """Output a pydantic model as indented JSON on stdout."""
    machine_output(json.dumps(model.model_dump(mode="json"), indent=2))
