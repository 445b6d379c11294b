# Categorías que se crean al inicializar la base (presupuesto mensual por defecto)
DEFAULT_CATEGORIES = [
    {"name": "Rent / Mortgage", "color": "#8b5cf6", "icon": "home", "monthly_budget": 1500},
    {"name": "Car", "color": "#06b6d4", "icon": "car", "monthly_budget": 400},
    {"name": "Groceries", "color": "#22c55e", "icon": "shopping-cart", "monthly_budget": 600},
    {"name": "Utilities", "color": "#eab308", "icon": "zap", "monthly_budget": 200},
    {"name": "Internet & Phone", "color": "#3b82f6", "icon": "wifi", "monthly_budget": 100},
    {"name": "Subscriptions", "color": "#ec4899", "icon": "tv", "monthly_budget": 50},
    {"name": "Travel", "color": "#f97316", "icon": "plane", "monthly_budget": 200},
    {"name": "Entertainment", "color": "#a855f7", "icon": "gamepad-2", "monthly_budget": 150},
    {"name": "Health", "color": "#14b8a6", "icon": "heart-pulse", "monthly_budget": 100},
    {"name": "Insurance", "color": "#64748b", "icon": "shield", "monthly_budget": 300},
    {"name": "Personal", "color": "#f43f5e", "icon": "user", "monthly_budget": 200},
    {"name": "Miscellaneous", "color": "#6b7280", "icon": "more-horizontal", "monthly_budget": 100},
    {"name": "Income", "color": "#10b981", "icon": "wallet", "monthly_budget": 0},
]
