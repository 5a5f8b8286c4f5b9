""" Urls of the modules define here... """

# Swagger API...
from ..config.swagger import api

# All Namespaces...
from ..profiles.handler import profile_namespace
from ..tax_accounts.handler import tax_account_namespace
from ..exchanges.handler import exchange_namespace
from ..transactions.handler import transaction_namespace
from ..properties.handler import property_namespace
from ..accounting.handler import accounting_namespace
from ..fees.handler import fee_namespace
from ..eat.handler import eat_namespace
from ..entities.handler import entity_namespace
from ..business_cards.handler import business_card_namespace
from ..documents.handler import document_namespace
from ..repository.handler import repository_namespace
from ..messaging.handler import messaging_namespace
from ..tasks.handler import task_namespace
from ..audit_logs.handler import audit_log_namespace
from ..search.handler import search_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    NAMESPACES = (
        profile_namespace,
        tax_account_namespace,
        exchange_namespace,
        transaction_namespace,
        property_namespace,
        accounting_namespace,
        fee_namespace,
        eat_namespace,
        entity_namespace,
        business_card_namespace,
        document_namespace,
        repository_namespace,
        messaging_namespace,
        task_namespace,
        audit_log_namespace,
        search_namespace
    )

    @staticmethod
    def add_namespaces():
        """ Function for adding namespaces... """

        for namespace in URLs.NAMESPACES:
            api.add_namespace(namespace)
