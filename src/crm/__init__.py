"""
CRM bounded context — клиенты и их заказы.
"""
