from prometheus_client import Counter, Histogram

REST_CALLS = Counter("oneview_rest_calls_total", "REST calls made to the appliance", ["method", "status"])
REST_LATENCY = Histogram("oneview_rest_latency_seconds", "REST call latency", ["method"])
LOGINS = Counter("oneview_logins_total", "Login sessions created", ["result"])
TASK_WAIT = Histogram("oneview_task_wait_seconds", "Time spent waiting on appliance tasks", ["result"])
TASK_POLL_ERRORS = Counter("oneview_task_poll_errors_total", "Errors while polling task status")
