""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-me')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
API_PAGE_LIMIT                  =   config('API_PAGE_LIMIT', default = 20, cast = int)
MAX_UPLOAD_BYTES                =   config('MAX_UPLOAD_BYTES', default = 50 * 1024 * 1024, cast = int)


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Exchange CRM",
                                "version": "1.0",
                                "description": "1031 exchange back office: tax accounts, \
                                transactions, exchanges, EAT parked files, accounting, \
                                fees, documents and messaging."
                            }


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'exchange_crm')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = 'postgres')


# Storage Constants (S3 compatible buckets)
STORAGE_ENDPOINT_URL            =   config('STORAGE_ENDPOINT_URL', default = None)
STORAGE_ACCESS_KEY_ID           =   config('STORAGE_ACCESS_KEY_ID', default = None)
STORAGE_SECRET_ACCESS_KEY       =   config('STORAGE_SECRET_ACCESS_KEY', default = None)
STORAGE_REGION                  =   config('STORAGE_REGION', default = 'us-east-1')
STORAGE_PUBLIC_URL              =   config('STORAGE_PUBLIC_URL', default = '')
STORAGE_TRANSACTIONS_BUCKET     =   config('STORAGE_TRANSACTIONS_BUCKET', default = 'transactions')
STORAGE_DOCUMENTS_BUCKET        =   config('STORAGE_DOCUMENTS_BUCKET', default = 'document-files')


# Exchange Deadlines (days from relinquished close)
IDENTIFICATION_PERIOD_DAYS      =   45
EXCHANGE_PERIOD_DAYS            =   180


# Identification Rules
MAX_PROPERTIES_3_RULE           =   3
RULE_200_PERCENT_MULTIPLIER     =   2
RULE_95_PERCENT_RATIO           =   0.95
RULE_200_WARNING_PERCENT        =   90


# Accounting
ENTRY_TYPES                     =   (
                                        "sale_proceeds",
                                        "purchase_funds",
                                        "fees",
                                        "earnest_money",
                                        "wire_in",
                                        "wire_out",
                                        "manual"
                                    )


# Transactions
SALE_TYPES                      =   ("Property", "Entity")
TRANSACTION_NUMBER_PREFIX       =   {"Property": "STA", "Entity": "ENT"}
EXCHANGE_LINK_SALE              =   "Sale"
EXCHANGE_LINK_PURCHASE          =   "Purchase"
TRANSACTION_STATUSES            =   ("Pending", "On-Hold", "Closed", "Canceled")
TRANSACTION_STATUS_CLOSED       =   "Closed"
OWNERSHIP_TYPES                 =   ("current", "pending", "prior")


# Exchanges
EXCHANGE_STATUSES               =   ("active", "completed", "cancelled")


# Identified Properties
IDENTIFICATION_TYPES            =   ("written_form", "by_contract")
IDENTIFIED_PROPERTY_TYPES       =   ("standard_address", "dst", "membership_interest")
IDENTIFIED_PROPERTY_STATUSES    =   ("identified", "under_contract", "acquired", "cancelled")


# EAT
EAT_LLC_STATUSES                =   ("Active", "Inactive", "Dissolved")
EAT_ACCESS_TYPES                =   ("signer", "viewer", "manager")
EAT_FILE_STATUSES               =   ("pending", "active", "completed", "cancelled")
EAT_INVOICE_TYPES               =   (
                                        "Invoice paid through exchange",
                                        "Invoice paid outside of exchange"
                                    )


# Documents
TEMPLATE_TYPES                  =   ("transaction", "exchange", "property", "eat")
COMPONENT_TYPES                 =   ("header", "footer")
SIGNATURE_FIELD_TYPES           =   ("signature", "date", "text")
DOCUMENT_STATUSES               =   (
                                        "draft",
                                        "pending_signatures",
                                        "partially_signed",
                                        "fully_signed",
                                        "completed",
                                        "cancelled"
                                    )
SIGNATURE_REQUEST_STATUSES      =   ("pending", "sent", "viewed", "signed", "declined", "expired")
SIGNATURE_TYPES                 =   ("property", "entity")
SIGNATURE_FONTS                 =   (
                                        "Brush Script MT",
                                        "Lucida Handwriting",
                                        "Segoe Script",
                                        "Monotype Corsiva",
                                        "Freestyle Script",
                                        "Edwardian Script ITC"
                                    )


# Repository
REPOSITORY_ENTITY_TYPES         =   ("profile", "tax_account", "transaction", "exchange", "eat", "property")
REPOSITORY_TRANSACTION_FOLDERS  =   (
                                        "Settlement Statement documents",
                                        "Wire Approvals",
                                        "Exchange Documents",
                                        "Contract Documents"
                                    )
REPOSITORY_DEFAULT_FOLDER       =   "Documents"


# Entities
ENTITY_RELATIONSHIPS            =   ("Manager", "Trustee", "Owner/Member", "Managing Member", "Beneficiary")


# Tasks & Audit
TASK_STATUSES                   =   ("pending", "completed")
ASSIGNEE_TYPES                  =   ("user", "admin")
AUDIT_ACTIONS                   =   ("create", "update", "delete")
