# crema_backend/app/utils/strings.py

# What it does:
# Strip whitespace or convert falsy/nulls to None
def null_to_none_or_strip(x) -> str | None:
    if not x:
        return None
    return str(x).strip() or None

# What it does:
# Lower-cased, stripped label or None (roast levels, severities from free-form notes)
def norm_label(x) -> str | None:
    s = null_to_none_or_strip(x)
    return s.lower() if s else None
