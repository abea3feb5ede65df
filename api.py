"""
FastAPI lookup service for Hebrew dates and Tachanun.

Thin JSON wrapper around hdate and tachanun. Run with:
    uvicorn api:app
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import DEFAULT_IL
from hdate import (
    HebrewDate,
    InvalidArgumentError,
    abs2hebrew,
    days_in_year,
    get_month_name,
    hebrew2abs,
    is_leap_year,
    months_in_year,
    validate_date,
)
from tachanun import tachanun


app = FastAPI()


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


def _date_payload(hdate: HebrewDate) -> Dict[str, Any]:
    return {
        "year": hdate.year,
        "month": hdate.month,
        "day": hdate.day,
        "monthName": hdate.month_name(),
        "dayOfWeek": hdate.day_of_week(),
    }


@app.get("/hebrew/{abs_day}")
async def hebrew_date(abs_day: int):
    """Hebrew date for an absolute day number."""
    return _date_payload(abs2hebrew(abs_day))


@app.get("/abs")
async def absolute_day(year: int, month: int, day: int):
    """Absolute day number for a Hebrew date."""
    validate_date(year, month, day)
    return {"abs": hebrew2abs(year, month, day)}


@app.get("/year/{year}")
async def year_info(year: int):
    return {
        "year": year,
        "leap": is_leap_year(year),
        "monthsInYear": months_in_year(year),
        "daysInYear": days_in_year(year),
    }


@app.get("/month-name")
async def month_name(month: int, year: int):
    return {"month": month, "year": year, "name": get_month_name(month, year)}


@app.get("/tachanun")
async def tachanun_for_date(year: int, month: int, day: int, il: Optional[bool] = None):
    """
    Tachanun status for a Hebrew date.

    Query example:
        /tachanun?year=5784&month=2&day=14&il=true

    When `il` is omitted the TACHANUN_DEFAULT_IL setting decides the locale.
    """
    validate_date(year, month, day)
    if il is None:
        il = DEFAULT_IL
    hdate = HebrewDate(year, month, day)
    payload = _date_payload(hdate)
    payload["il"] = il
    payload.update(tachanun(hdate, il).to_dict())
    return payload
