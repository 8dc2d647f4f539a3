from briki.db.base import Base

# Import all models here
from briki.models.insurance_plan import InsurancePlan
from briki.models.plan_interaction import PlanInteraction

__all__ = ["Base", "InsurancePlan", "PlanInteraction"]
