from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_orders_created_total = Counter(
    "ecomm_orders_created_total",
    "Total orders created"
)

ecomm_orders_paid_total = Counter(
    "ecomm_orders_paid_total",
    "Total mark-paid updates applied, repeated payments included"
)

ecomm_order_value = Histogram(
    "ecomm_order_value",
    "Total price of created orders",
    buckets=(10, 25, 50, 100, 250, 500, 1000, 2500, 5000)
)

ecomm_summary_requests_total = Counter(
    "ecomm_summary_requests_total",
    "Total sales summary computations"
)
