from dataclasses import dataclass

from synthdata_ui.api_client import SynthDataClient


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: str


@dataclass
class SessionContext:
    """The signed-in user and an authenticated API client, handed to every view."""
    api: SynthDataClient
    user: CurrentUser

    @classmethod
    def sign_in(cls, api: SynthDataClient, email: str, password: str) -> "SessionContext":
        api.sign_in(email, password)
        return cls._for(api)

    @classmethod
    def sign_up(cls, api: SynthDataClient, email: str, password: str) -> "SessionContext":
        api.sign_up(email, password)
        return cls._for(api)

    @classmethod
    def _for(cls, api: SynthDataClient) -> "SessionContext":
        me = api.current_user()
        return cls(api=api, user=CurrentUser(id=me["id"], email=me["email"]))

    def sign_out(self) -> None:
        self.api.sign_out()
