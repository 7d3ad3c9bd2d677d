"""Contains methods for accessing the API"""

class API:
    def __init__(self, client):
        self.client = client
        self.balances = BalancesAPI(client)
        self.payouts = PayoutsAPI(client)
        self.creditor_bank_accounts = CreditorBankAccountsAPI(client)
        self.webhooks = WebhooksAPI(client)

class BalancesAPI:
    def __init__(self, client):
        self.client = client

    def list(self, creditor, **kwargs):
        from .balances import list_balances
        return list_balances.sync_detailed(client=self.client, creditor=creditor, **kwargs)

class PayoutsAPI:
    def __init__(self, client):
        self.client = client

    def list(self, **kwargs):
        from .payouts import list_payouts
        return list_payouts.sync_detailed(client=self.client, **kwargs)

    def get(self, identity, **kwargs):
        from .payouts import get_a_payout
        return get_a_payout.sync_detailed(identity, client=self.client, **kwargs)

class CreditorBankAccountsAPI:
    def __init__(self, client):
        self.client = client

    def create(self, body, **kwargs):
        from .creditor_bank_accounts import create_a_creditor_bank_account
        return create_a_creditor_bank_account.sync_detailed(client=self.client, body=body, **kwargs)

    def list(self, **kwargs):
        from .creditor_bank_accounts import list_creditor_bank_accounts
        return list_creditor_bank_accounts.sync_detailed(client=self.client, **kwargs)

    def get(self, identity, **kwargs):
        from .creditor_bank_accounts import get_a_creditor_bank_account
        return get_a_creditor_bank_account.sync_detailed(identity, client=self.client, **kwargs)

    def disable(self, identity, **kwargs):
        from .creditor_bank_accounts import disable_a_creditor_bank_account
        return disable_a_creditor_bank_account.sync_detailed(identity, client=self.client, **kwargs)

class WebhooksAPI:
    def __init__(self, client):
        self.client = client

    def list(self, **kwargs):
        from .webhooks import list_webhooks
        return list_webhooks.sync_detailed(client=self.client, **kwargs)

    def get(self, identity, **kwargs):
        from .webhooks import get_a_webhook
        return get_a_webhook.sync_detailed(identity, client=self.client, **kwargs)

    def retry(self, identity, **kwargs):
        from .webhooks import retry_a_webhook
        return retry_a_webhook.sync_detailed(identity, client=self.client, **kwargs)
