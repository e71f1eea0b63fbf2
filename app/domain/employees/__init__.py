"""
Employees bounded context: domain layer.

This module contains all domain logic for employee records:
- The Employee entity and pagination value objects
- Payload validation rules
- The repository port implemented by infrastructure adapters
"""
