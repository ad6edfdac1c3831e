import requests
from typing import Any, Dict, List, Optional

from synthdata_ui.config import API_URL, API_TIMEOUT


class ApiError(Exception):
    """A failed API call; `message` is meant to be shown to the user verbatim."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason or f"HTTP {response.status_code}"
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, list):
        # FastAPI validation errors
        return "; ".join(str(item.get("msg", item)) for item in detail)
    return str(detail or payload)


class SynthDataClient:
    """Thin wrapper over the SynthData REST API."""

    def __init__(self, base_url: str = API_URL, token: Optional[str] = None, timeout: Optional[float] = API_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            response = requests.request(
                method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise ApiError(f"Could not reach the API: {e}") from e
        if not response.ok:
            raise ApiError(_error_message(response), response.status_code)
        return response.json() if response.content else None

    # Auth
    def sign_in(self, email: str, password: str) -> str:
        data = self._request(
            "POST",
            "/auth/token",
            data={"username": email, "password": password},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        self.token = data["access_token"]
        return self.token

    def sign_up(self, email: str, password: str) -> Dict:
        user = self._request("POST", "/auth/register", json={"email": email, "password": password})
        self.sign_in(email, password)
        return user

    def sign_out(self) -> None:
        self.token = None

    def current_user(self) -> Dict:
        return self._request("GET", "/auth/me")

    # Projects
    def list_projects(self) -> List[Dict]:
        return self._request("GET", "/projects/")

    def create_project(self, name: str, description: str = "", industry: str = "fintech") -> Dict:
        return self._request(
            "POST", "/projects/", json={"name": name, "description": description, "industry": industry}
        )

    # Datasets
    def list_templates(self) -> List[Dict]:
        return self._request("GET", "/templates/")

    def upload_dataset(self, project_id: str, name: str, description: str, filename: str, content: bytes,
                       content_type: str = "text/csv") -> Dict:
        return self._request(
            "POST",
            "/datasets/upload",
            data={"project_id": project_id, "name": name, "description": description},
            files={"file": (filename, content, content_type)},
        )

    def create_dataset_from_template(self, project_id: str, template_id: str) -> Dict:
        return self._request(
            "POST", "/datasets/from-template", json={"project_id": project_id, "template_id": template_id}
        )

    def get_dataset(self, dataset_id: str) -> Dict:
        return self._request("GET", f"/datasets/{dataset_id}")

    # Generations
    def create_generation(self, dataset_id: str, model_type: str, row_count: int, epsilon: float,
                          k_anonymity: int) -> Dict:
        return self._request(
            "POST",
            "/generations/",
            json={
                "dataset_id": dataset_id,
                "model_type": model_type,
                "row_count": row_count,
                "epsilon": epsilon,
                "k_anonymity": k_anonymity,
            },
        )

    def list_generations(self) -> List[Dict]:
        return self._request("GET", "/generations/")

    # Dashboard
    def get_stats(self) -> Dict:
        return self._request("GET", "/dashboard/stats")
