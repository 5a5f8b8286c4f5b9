"""
Audit Log Request Definition
Handles:
    - entity_type, entity_id, action_type, limit (query string)
"""

# Base
from ...base.request_context import query_args





class ListAuditLogsRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.param('entity_type', 'Entity type (profile, tax_account, ...)', _in = 'query')(func)
            func = namespace.param('entity_id', 'Entity id', _in = 'query', type = 'integer')(func)
            func = namespace.param('action_type', 'create, update or delete', _in = 'query')(func)
            func = namespace.param('limit', 'Max rows (default 100)', _in = 'query', type = 'integer')(func)
            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract query string
        """

        return query_args()
