""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "RECORD_DELETED"                :   "Deleted successfully.",
    "TAX_ACCOUNT_DELETED"           :   "Tax account deleted successfully.",
    "BUSINESS_NAME_DELETED"         :   "Business name deleted successfully.",
    "IDENTIFIED_PROPERTY_DELETED"   :   "Identified property deleted successfully.",
    "IMPROVEMENT_DELETED"           :   "Improvement deleted successfully.",
    "ENTRY_DELETED"                 :   "Accounting entry deleted successfully.",
    "FEE_TEMPLATE_DELETED"          :   "Fee template deleted successfully.",
    "OWNERSHIP_REMOVED"             :   "Ownership removed successfully.",
    "FOLDER_DELETED"                :   "Folder deleted successfully.",
    "FILE_DELETED"                  :   "File deleted successfully.",
    "MESSAGE_DELETED"               :   "Message deleted successfully."
}


# ERROR MESSAGES
ERROR = {
    # General Errors
    "REQUIRED_FIELDS"               :   "All required fields must be filled",
    "FIELD_REQUIRED"                :   "{field} is required.",
    "INVALID_NUMBER"                :   "{field} must be a number.",
    "NEGATIVE_NUMBER"               :   "{field} must be 0 or more.",
    "INVALID_DATE"                  :   "{field} must be a date (YYYY-MM-DD).",
    "INVALID_CHOICE"                :   "{field} must be one of: {choices}.",
    "INVALID_REQUEST"               :   "Request body is required.",
    "FILE_REQUIRED"                 :   "File is required.",
    "INVALID_FILE"                  :   "Invalid file name.",
    "UNSUPPORTED_FILE_FORMAT"       :   "Unsupported file format: {file_extension}. Supported formats: {supported}",
    "UNKNOWN_ERROR"                 :   "Unknown error",
    "RECORD_NOT_FOUND"              :   "Record not found.",
    "INTERNAL_SERVER_ERROR"         :   "Something went wrong. Please try again later.",

    # Storage Errors
    "STORAGE_UPLOAD_FAILED"         :   "Unable to upload file. Please try again.",
    "STORAGE_DELETE_FAILED"         :   "Unable to delete file from storage.",

    # Profile Errors
    "PROFILE_NOT_FOUND"             :   "Profile not found.",
    "PROFILE_NAME_REQUIRED"         :   "First name and last name are required.",
    "PROFILE_SAVE_FAILED"           :   "Unable to save profile.",

    # Tax Account Errors
    "TAX_ACCOUNT_NOT_FOUND"         :   "Tax account not found.",
    "TAX_ACCOUNT_NAME_REQUIRED"     :   "Tax account name is required.",
    "TAX_ACCOUNT_PROFILE_REQUIRED"  :   "Profile is required.",
    "SPOUSAL_FIELDS_REQUIRED"       :   "Primary and spouse profiles and account names are required.",
    "SPOUSAL_SAME_PROFILE"          :   "Primary and spouse must be different profiles.",
    "TAX_ACCOUNT_CREATE_FAILED"     :   "Unable to create tax account. Please try again.",
    "TAX_ACCOUNT_UPDATE_FAILED"     :   "Unable to update tax account.",
    "TAX_ACCOUNT_DELETE_FAILED"     :   "Unable to delete tax account.",
    "BUSINESS_NAME_NOT_FOUND"       :   "Business name not found.",
    "BUSINESS_NAME_REQUIRED"        :   "Business name is required.",
    "BUSINESS_NAME_SAVE_FAILED"     :   "Unable to save business name.",
    "INVALID_DATE_RANGE"            :   "Start date must be on or before end date.",
    "INVALID_YEAR"                  :   "Year must be a 4 digit number.",

    # Exchange Errors
    "EXCHANGE_NOT_FOUND"            :   "Exchange not found.",
    "EXCHANGE_UPDATE_FAILED"        :   "Unable to update exchange.",
    "EXCHANGE_RULE_VIOLATION"       :   "This property cannot be identified.",
    "IDENTIFIED_PROPERTY_NOT_FOUND" :   "Identified property not found.",
    "IDENTIFIED_PROPERTY_SAVE_FAILED":  "Unable to save identified property.",
    "IMPROVEMENT_NOT_FOUND"         :   "Improvement not found.",
    "IMPROVEMENT_DESCRIPTION_REQUIRED": "Improvement description is required.",

    # Transaction Errors
    "TRANSACTION_NOT_FOUND"         :   "Transaction not found.",
    "SELLER_REQUIRED"               :   "Add at least one seller",
    "BUYER_REQUIRED"                :   "Add at least one buyer",
    "NON_EXCHANGE_SELLER_INVALID"   :   "Non-exchange sellers need a name and a contract percent greater than 0",
    "SELLER_INVALID"                :   "Each seller needs a tax account, a vesting name and a contract percent greater than 0",
    "NON_EXCHANGE_BUYER_INVALID"    :   "Non-exchange buyers need a name and a contract percent greater than 0",
    "BUYER_INVALID"                 :   "Each buyer needs a profile, an exchange and a contract percent greater than 0",
    "BUYER_EXCHANGE_MISMATCH"       :   "The selected exchange does not belong to the buyer",
    "PROPERTY_REQUIRED"             :   "Please select a property",
    "TRANSACTION_CREATE_FAILED"     :   "Unable to create transaction. Please try again.",
    "TRANSACTION_UPDATE_FAILED"     :   "Unable to update transaction.",
    "CONTRACT_UPLOAD_FAILED"        :   "Unable to upload contract.",
    "SETTLEMENT_NOT_FOUND"          :   "Settlement statement not found.",
    "SETTLEMENT_SAVE_FAILED"        :   "Unable to save settlement statement.",
    "SETTLEMENT_SELLER_REQUIRED"    :   "Seller is required.",
    "SETTLEMENT_BUYER_REQUIRED"     :   "Buyer is required.",

    # Property Errors
    "PROPERTY_NOT_FOUND"            :   "Property not found.",
    "PROPERTY_ADDRESS_REQUIRED"     :   "Property address is required.",
    "PROPERTY_SAVE_FAILED"          :   "Unable to save property.",
    "OWNERSHIP_NOT_FOUND"           :   "No current ownership for this tax account.",

    # Accounting Errors
    "ENTRY_NOT_FOUND"               :   "Accounting entry not found.",
    "ENTRY_AMOUNT_REQUIRED"         :   "Enter a credit or a debit amount.",
    "ENTRY_EXCHANGE_REQUIRED"       :   "Select a from or to exchange.",
    "ENTRY_SAVE_FAILED"             :   "Unable to save accounting entry.",
    "FEE_REQUIRED"                  :   "Please select a fee",
    "FEE_NOT_FOUND"                 :   "Fee not found",
    "TAKE_FEE_FAILED"               :   "Unable to take fee.",

    # Fee Errors
    "FEE_NAME_PRICE_REQUIRED"       :   "Name and price are required",
    "FEE_PRICE_INVALID"             :   "Price must be a positive number",
    "FEE_PRICE_UNCHANGED"           :   "Price has not changed",
    "FEE_COMMENT_REQUIRED"          :   "Comment is required when changing price",
    "FEE_TEMPLATE_NOT_FOUND"        :   "Fee template not found.",
    "FEE_SCHEDULE_NOT_FOUND"        :   "Fee schedule not found.",
    "FEE_SAVE_FAILED"               :   "Unable to save fee.",

    # EAT Errors
    "EAT_LLC_NOT_FOUND"             :   "EAT LLC not found.",
    "EAT_LLC_FIELDS_REQUIRED"       :   "Company name, state of formation and date of formation are required.",
    "EAT_LLC_SAVE_FAILED"           :   "Unable to save EAT LLC.",
    "EAT_ACCESS_NOT_FOUND"          :   "Access not found.",
    "EAT_ACCESS_PROFILE_REQUIRED"   :   "User profile is required.",
    "EAT_FILE_NOT_FOUND"            :   "EAT parked file not found.",
    "EAT_FILE_FIELDS_REQUIRED"      :   "EAT name, LLC, state, date of formation and at least one exchangor are required.",
    "EAT_FILE_CREATE_FAILED"        :   "Unable to create EAT parked file. Please try again.",
    "EAT_FILE_UPDATE_FAILED"        :   "Unable to update EAT parked file.",
    "EAT_EXCHANGOR_NOT_FOUND"       :   "Exchangor not found.",
    "EAT_INVOICE_NOT_FOUND"         :   "Invoice not found.",
    "EAT_INVOICE_ITEM_NOT_FOUND"    :   "Invoice item not found.",
    "EAT_INVOICE_FIELDS_REQUIRED"   :   "Invoice type, paid to and invoice date are required.",
    "EAT_INVOICE_ITEM_INVALID"      :   "Each item needs a description and an amount of 0 or more.",
    "EAT_INVOICE_SAVE_FAILED"       :   "Unable to save invoice.",

    # Entity Errors
    "ENTITY_NOT_FOUND"              :   "Entity not found.",
    "ENTITY_NAME_REQUIRED"          :   "Entity name is required.",
    "ENTITY_SAVE_FAILED"            :   "Unable to save entity.",
    "ENTITY_ACCESS_NOT_FOUND"       :   "Access not found.",

    # Business Card Errors
    "BUSINESS_CARD_NOT_FOUND"       :   "Business card not found.",
    "BUSINESS_CARD_FIELDS_REQUIRED" :   "Business name and email are required.",
    "BUSINESS_CARD_SAVE_FAILED"     :   "Unable to save business card.",

    # Document Errors
    "COMPONENT_NOT_FOUND"           :   "Template component not found.",
    "COMPONENT_FIELDS_REQUIRED"     :   "Component name and type are required.",
    "TEMPLATE_NOT_FOUND"            :   "Template not found.",
    "TEMPLATE_FIELDS_REQUIRED"      :   "Template name and type are required.",
    "SIGNATURE_FIELD_NOT_FOUND"     :   "Signature field not found.",
    "SIGNATURE_FIELD_NAME_REQUIRED" :   "Field name is required.",
    "DOCUMENT_NOT_FOUND"            :   "Document not found.",
    "DOCUMENT_TEMPLATE_REQUIRED"    :   "Template is required.",
    "DOCUMENT_SAVE_FAILED"          :   "Unable to save document.",
    "SIGNATURE_REQUEST_NOT_FOUND"   :   "Signature request not found.",
    "SIGNATURE_NOT_FOUND"           :   "Signature not found.",
    "SIGNATURE_FIELDS_REQUIRED"     :   "Signature type, text and font are required.",
    "VESTING_SIGNATURE_FIELDS_REQUIRED": "Tax account and vesting name are required.",
    "ADMIN_SIGNATURE_USER_REQUIRED" :   "Admin user is required.",

    # Repository Errors
    "REPOSITORY_NOT_FOUND"          :   "Repository not found.",
    "FOLDER_NOT_FOUND"              :   "Folder not found.",
    "FOLDER_NAME_REQUIRED"          :   "Folder name is required.",
    "FILE_NOT_FOUND"                :   "File not found.",
    "FILE_NAME_REQUIRED"            :   "File name is required.",
    "REPOSITORY_SAVE_FAILED"        :   "Unable to save to the document repository.",

    # Messaging Errors
    "CONVERSATION_NOT_FOUND"        :   "Conversation not found.",
    "CONVERSATION_ENTITY_REQUIRED"  :   "Entity type and entity id are required.",
    "MESSAGE_NOT_FOUND"             :   "Message not found.",
    "MESSAGE_CONTENT_REQUIRED"      :   "Message content is required.",
    "MESSAGE_SAVE_FAILED"           :   "Unable to send message.",
    "USER_REQUIRED"                 :   "X-User-Id header is required.",

    # Task Errors
    "TASK_NOT_FOUND"                :   "Task not found.",
    "TASK_FIELDS_REQUIRED"          :   "Title, entity type and entity id are required.",
    "TASK_SAVE_FAILED"              :   "Unable to save task.",
    "TASK_NOTE_REQUIRED"            :   "Note text is required.",

    # Search Errors
    "SEARCH_QUERY_TOO_SHORT"        :   "Search text must be at least {} characters."
}
