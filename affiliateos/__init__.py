"""AffiliateOS: a Telegram-fronted assistant for affiliate marketing creators."""
