"""
Endpoint catalog. Paths are part of the wire contract and must not change.
"""

SESSION_SIGNIN = "/Session/Signin"
SESSION_SERVER_INFO = "/Session/ServerInfo"
SESSION_SERVER_ERROR = "/Session/ServerError"
USER = "/User"
USER_LOOKUP = "/User/Lookup"
ASSET_TYPE_SPECIFICATIONS = "/AssetTypeSpecifications"

ACCOUNTS = "/Accounts"
ACCOUNT = "/Account"
ACCOUNT_CREATE = "/Account/Create"
ACCOUNT_DESTROY = "/Account/Destroy"
ACCOUNT_RENAME = "/Account/Rename"
ACCOUNT_ASSETS = "/Account/Assets"
ACCOUNT_ASSET_SUMMARY = "/Account/AssetSummary"
ACCOUNT_AUDITS = "/Account/Audits"
ACCOUNT_FUNDING = "/Account/Funding"

PERMISSIONS = "/Permissions"
SET_PERMISSION = "/SetPermission"
UNSET_PERMISSION = "/UnsetPermission"

OFFERINGS = "/Offerings"
OFFERING = "/Offering"
OFFERING_CREATE = "/Offering/Create"
OFFERING_DELETE = "/Offering/Delete"
OFFERING_SAVE = "/Offering/Save"
OFFERING_ACTIVATE = "/Offering/Activate"
OFFERING_PAUSE = "/Offering/Pause"

PUBLIC_OFFERINGS = "/PublicOfferings"
PUBLIC_OFFERING = "/PublicOffering"
PUBLIC_OFFERING_MARKET = "/PublicOffering/Market"

ORDERS = "/Orders"
ORDER = "/Order"
ORDER_CREATE = "/Order/Create"
ORDER_CLOSE = "/Order/Close"
ORDER_TRANSACTIONS = "/Order/Transactions"
