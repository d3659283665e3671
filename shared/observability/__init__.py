from .setup import setup_observability
from .metrics import (
    ecomm_orders_created_total,
    ecomm_orders_paid_total,
    ecomm_order_value,
    ecomm_summary_requests_total
)
