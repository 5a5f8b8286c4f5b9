"""
exchange_crm
============
Back office API for a 1031 exchange qualified intermediary.

    from exchange_crm.app import create_app
"""
