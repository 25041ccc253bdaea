"""Prometheus メトリクス定義"""

from prometheus_client import Counter, Histogram

# ── 通知メトリクス ────────────────────────────────────
notifications_sent_total = Counter(
    "notifications_sent_total",
    "通知送信結果数",
    ["channel", "status"],  # status: sent / failed / pending
)

notification_send_duration_seconds = Histogram(
    "notification_send_duration_seconds",
    "プロバイダ呼び出し時間",
    ["channel"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

provider_errors_total = Counter(
    "notification_provider_errors_total",
    "プロバイダ例外発生数",
    ["channel", "error_type"],
)
