# inventory/api/urls.py

from django.urls import path

from inventory.api.views import (
    ActiveAlertsView,
    ProductionView,
    PurchaseView,
    SaleView,
    StockSummaryView,
)

urlpatterns = [
    path("production/", ProductionView.as_view(), name="inventory-production"),
    path("sales/", SaleView.as_view(), name="inventory-sales"),
    path("purchases/", PurchaseView.as_view(), name="inventory-purchases"),
    path("summary/", StockSummaryView.as_view(), name="inventory-summary"),
    path("alerts/active/", ActiveAlertsView.as_view(), name="inventory-alerts-active"),
]
