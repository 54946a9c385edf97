from datetime import date, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from vikfit.dates import today
from vikfit.db import get_db
from vikfit.repositories.weight_repo import WeightRepository
from vikfit.schemas.weight import WeightEntryRead, WeightRecord

router = APIRouter(prefix="/weight", tags=["weight"])

@router.get("", response_model=list[WeightEntryRead])
def weight_entries(
    db: Session = Depends(get_db),
    start: date | None = Query(None, description="default 30 days before end"),
    end: date | None = Query(None, description="default today"),
):
    end = end or today()
    start = start or end - timedelta(days=30)
    return WeightRepository(db).between(start, end)

@router.get("/latest", response_model=WeightEntryRead | None)
def latest_weight(db: Session = Depends(get_db)):
    return WeightRepository(db).latest()

@router.put("/{weight_date}", response_model=WeightEntryRead)
def record_weight(weight_date: date, payload: WeightRecord, db: Session = Depends(get_db)):
    return WeightRepository(db).record(weight_date, **payload.model_dump())

@router.delete("/{weight_date}", status_code=status.HTTP_204_NO_CONTENT)
def delete_weight(weight_date: date, db: Session = Depends(get_db)):
    if not WeightRepository(db).delete(weight_date):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No weight entry for that date")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
