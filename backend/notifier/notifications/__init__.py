# backend/notifier/notifications/__init__.py

"""
アプリケーション側から使う通知レイヤ。

呼び出し元は Webhook の送信先やフォーマットを意識せず、
NotificationService の send_notification / send_critical_alert だけを使う。

構成イメージ:
- service: 通知インターフェースと実装（Webhook / ログ出力）
- factory: アプリ全体で共有する NotificationService の生成
"""
