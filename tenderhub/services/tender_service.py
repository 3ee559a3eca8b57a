from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.core.errors import ValidationError
from tenderhub.core.logging_config import logger
from tenderhub.crud.tenders import get_owned_tender, save_tender
from tenderhub.models.tenders import Tender
from tenderhub.schemas.tenders import TenderCreate, TenderUpdate, check_budget
from tenderhub.services.tender_state_machine import TenderStateMachine


async def create_tender(db: AsyncSession, company_id, data: TenderCreate) -> Tender:
    values = data.model_dump()
    values["status"] = data.status.value
    tender = await save_tender(db, Tender(company_id=company_id, **values))
    logger.info(f"Company {company_id} created tender {tender.id} in state {tender.status}")
    return tender


async def update_tender(db: AsyncSession, tender_id, company_id, data: TenderUpdate) -> Tender:
    # ownership is checked against the database on every call
    tender = await get_owned_tender(db, tender_id, company_id)
    changes = data.model_dump(exclude_unset=True)

    budget_min = changes.get("budget_min", tender.budget_min)
    budget_max = changes.get("budget_max", tender.budget_max)
    try:
        check_budget(
            float(budget_min) if budget_min is not None else None,
            float(budget_max) if budget_max is not None else None,
        )
    except ValueError as e:
        raise ValidationError(str(e))

    target_status = changes.pop("status", None)
    if target_status is not None:
        sm = TenderStateMachine(tender.id, tender.status)
        tender.status = await sm.advance(target_status.value)

    for key, value in changes.items():
        setattr(tender, key, value)
    return await save_tender(db, tender)
