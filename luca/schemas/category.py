"""
Category and source enumerations plus display metadata.
"""

import enum
from typing import Dict

from pydantic import BaseModel


class Category(str, enum.Enum):
    """Closed set of spending categories."""
    food = "food"
    supermarket = "supermarket"
    transport = "transport"
    housing = "housing"
    shopping = "shopping"
    health = "health"
    entertainment = "entertainment"
    subscriptions = "subscriptions"
    travel = "travel"
    taxes = "taxes"
    transfers = "transfers"
    income = "income"
    diving = "diving"
    technology = "technology"
    other = "other"


class Source(str, enum.Enum):
    """Bank export a transaction was parsed from."""
    caixabank = "caixabank"
    revolut = "revolut"


CATEGORY_CONFIG: Dict[Category, Dict[str, str]] = {
    Category.food: {"label": "Restaurantes y bares", "color": "#f59e0b", "icon": "utensils-crossed"},
    Category.supermarket: {"label": "Supermercado", "color": "#84cc16", "icon": "shopping-cart"},
    Category.transport: {"label": "Transporte", "color": "#3b82f6", "icon": "car"},
    Category.housing: {"label": "Vivienda", "color": "#8b5cf6", "icon": "home"},
    Category.shopping: {"label": "Compras", "color": "#ec4899", "icon": "shopping-bag"},
    Category.health: {"label": "Salud y farmacia", "color": "#10b981", "icon": "heart"},
    Category.entertainment: {"label": "Ocio", "color": "#f97316", "icon": "music"},
    Category.subscriptions: {"label": "Suscripciones", "color": "#06b6d4", "icon": "repeat"},
    Category.travel: {"label": "Viajes", "color": "#14b8a6", "icon": "plane"},
    Category.taxes: {"label": "Impuestos", "color": "#ef4444", "icon": "receipt"},
    Category.transfers: {"label": "Transferencias", "color": "#6b7280", "icon": "arrow-left-right"},
    Category.income: {"label": "Ingresos", "color": "#10b981", "icon": "trending-up"},
    Category.diving: {"label": "Buceo", "color": "#0ea5e9", "icon": "waves"},
    Category.technology: {"label": "Tecnología", "color": "#a855f7", "icon": "laptop"},
    Category.other: {"label": "Otros", "color": "#9ca3af", "icon": "more-horizontal"},
}


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: Category
    label: str
    color: str
    icon: str
