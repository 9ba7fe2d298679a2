"""Hours bank package.

Feature modules (employees, hours) each carry a model, a repository Protocol
with its MySQL implementation, a service layer and a thin Flask controller.
"""
