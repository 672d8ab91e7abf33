"""Schemas for dashboard statistics."""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    filieres: int
    promotions: int
    apprenants: int
    candidatures_en_attente: int
    candidatures_acceptees: int
    candidatures_refusees: int
