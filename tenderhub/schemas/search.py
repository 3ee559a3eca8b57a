from typing import List, Optional

from tenderhub.schemas.companies import CompanySummary, GoodsServiceOut


class CompanySearchHit(CompanySummary):
    description: Optional[str] = None
    goods_services: List[GoodsServiceOut] = []
