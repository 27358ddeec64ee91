import logging
import mimetypes
from pathlib import Path
from typing import Any, BinaryIO, Callable, Dict, List, Optional, Union

import httpx

from client.token_store import FileTokenStore, TokenStore

logger = logging.getLogger("nutritrack.client")

DEFAULT_BASE_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT = 10.0


class APIError(Exception):
    """Non-2xx response from the API"""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


class AuthenticationRequired(APIError):
    """The server rejected the token; the caller has to log in again"""


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase, None
    if isinstance(payload, dict):
        message = payload.get("message") or (payload.get("error") or {}).get("message")
        if message:
            return message, payload
    return response.reason_phrase, payload


class NutriTrackClient:
    """
    Synchronous client grouping calls by resource.

    Example:
        >>> api = NutriTrackClient()
        >>> api.auth.login("ana@example.com", "secret")
        >>> api.meals.list(date="2024-03-01")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token_store: Optional[TokenStore] = None,
        http: Optional[httpx.Client] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.tokens = token_store if token_store is not None else FileTokenStore()
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)
        self.on_unauthorized = on_unauthorized

        self.auth = AuthAPI(self)
        self.meals = MealsAPI(self)
        self.recipes = RecipesAPI(self)
        self.documents = DocumentsAPI(self)
        self.user = UserAPI(self)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "NutriTrackClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send one request with the stored token and decode the JSON reply.

        Raises:
            AuthenticationRequired: on 401, after clearing the stored token
                and invoking on_unauthorized
            APIError: on any other non-2xx status
        """
        headers = dict(kwargs.pop("headers", None) or {})
        token = self.tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self.http.request(method, f"{self.base_url}{path}", headers=headers, **kwargs)

        if response.status_code == 401:
            message, payload = _error_message(response)
            logger.info("unauthorized path=%s; clearing stored token", path)
            self.tokens.clear()
            if self.on_unauthorized is not None:
                self.on_unauthorized()
            raise AuthenticationRequired(401, message, payload)
        if response.is_error:
            message, payload = _error_message(response)
            raise APIError(response.status_code, message, payload)
        if not response.content:
            return None
        return response.json()


class _Resource:
    def __init__(self, client: NutriTrackClient):
        self._client = client


class AuthAPI(_Resource):
    def register(self, email: str, password: str) -> Dict[str, Any]:
        data = self._client.request(
            "POST", "/auth/register", json={"email": email, "password": password}
        )
        self._client.tokens.set(data["token"])
        return data

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._client.request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        self._client.tokens.set(data["token"])
        return data

    def profile(self) -> Dict[str, Any]:
        return self._client.request("GET", "/auth/profile")

    def logout(self) -> None:
        """Tell the server, then forget the token even if the call fails."""
        try:
            self._client.request("POST", "/auth/logout")
        finally:
            self._client.tokens.clear()


class MealsAPI(_Resource):
    def list(
        self,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = {}
        if date:
            params["date"] = date
        if start_date and end_date:
            params["startDate"] = start_date
            params["endDate"] = end_date
        return self._client.request("GET", "/meals", params=params)

    def summary(self, month: Optional[str] = None) -> Dict[str, Any]:
        params = {"month": month} if month else {}
        return self._client.request("GET", "/meals/summary", params=params)

    def get(self, meal_id: str) -> Dict[str, Any]:
        return self._client.request("GET", f"/meals/{meal_id}")

    def create(self, meal: Dict[str, Any]) -> Dict[str, Any]:
        return self._client.request("POST", "/meals", json=meal)

    def update(self, meal_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self._client.request("PUT", f"/meals/{meal_id}", json=changes)

    def delete(self, meal_id: str) -> Dict[str, Any]:
        return self._client.request("DELETE", f"/meals/{meal_id}")


class RecipesAPI(_Resource):
    def list(self) -> List[Dict[str, Any]]:
        return self._client.request("GET", "/recipes")

    def search(self, query: str) -> List[Dict[str, Any]]:
        return self._client.request("GET", "/recipes/search", params={"q": query})

    def get(self, recipe_id: str) -> Dict[str, Any]:
        return self._client.request("GET", f"/recipes/{recipe_id}")

    def create(self, recipe: Dict[str, Any]) -> Dict[str, Any]:
        return self._client.request("POST", "/recipes", json=recipe)

    def update(self, recipe_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self._client.request("PUT", f"/recipes/{recipe_id}", json=changes)

    def delete(self, recipe_id: str) -> Dict[str, Any]:
        return self._client.request("DELETE", f"/recipes/{recipe_id}")


class DocumentsAPI(_Resource):
    def list(self, doc_type: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"type": doc_type} if doc_type else {}
        return self._client.request("GET", "/documents", params=params)

    def upload(
        self,
        source: Union[str, Path, BinaryIO],
        doc_type: str,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Upload a path or an open binary file as ``doc_type``.

        The part's content type is guessed from the filename unless given.
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            with path.open("rb") as fh:
                return self._send(fh, filename or path.name, doc_type, content_type)
        name = filename or getattr(source, "name", "document.pdf")
        return self._send(source, name, doc_type, content_type)

    def _send(
        self, fh: BinaryIO, filename: str, doc_type: str, content_type: Optional[str]
    ) -> Dict[str, Any]:
        name = Path(filename).name
        if content_type is None:
            content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        return self._client.request(
            "POST",
            "/documents/upload",
            files={"file": (name, fh, content_type)},
            data={"type": doc_type},
        )

    def delete(self, document_id: str) -> Dict[str, Any]:
        return self._client.request("DELETE", f"/documents/{document_id}")


class UserAPI(_Resource):
    def update_profile(
        self, daily_calorie_goal: Optional[int] = None, diet_type: Optional[str] = None
    ) -> Dict[str, Any]:
        body = {}
        if daily_calorie_goal is not None:
            body["dailyCalorieGoal"] = daily_calorie_goal
        if diet_type is not None:
            body["dietType"] = diet_type
        return self._client.request("PUT", "/user/profile", json=body)

    def update_calorie_goal(self, goal: int) -> Dict[str, Any]:
        return self._client.request("PUT", "/user/calorie-goal", json={"dailyCalorieGoal": goal})

    def update_diet_type(self, diet_type: str) -> Dict[str, Any]:
        return self._client.request("PUT", "/user/diet-type", json={"dietType": diet_type})
