"""
Service layer.

Services encapsulate business logic and talk to the store; API
handlers only translate between HTTP and service calls.
"""
