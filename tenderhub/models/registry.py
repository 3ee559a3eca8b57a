from tenderhub.models.base import Base
from tenderhub.models.users import User
from tenderhub.models.companies import Company
from tenderhub.models.goods_services import GoodsService
from tenderhub.models.tenders import Tender
from tenderhub.models.applications import Application

__all__ = ["Base", "User", "Company", "GoodsService", "Tender", "Application"]
