"""
Shared kernel — общие value objects и инфраструктурные контракты.

Не зависит от конкретных bounded context (CRM и др.) и может
использоваться любым из них.
"""
