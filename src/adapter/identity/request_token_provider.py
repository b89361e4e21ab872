"""TokenProvider backed by the credential that came with the current request."""


class RequestTokenProvider:
    """Hands out the already-verified bearer token of one request.

    Both values are None when the request carried no valid credential, which
    the dashboard treats as signed out.
    """

    def __init__(self, token: str | None, operator_id: str | None):
        self._token = token if operator_id else None
        self._operator_id = operator_id

    @property
    def operator_id(self) -> str | None:
        return self._operator_id

    async def get_token(self) -> str | None:
        return self._token
