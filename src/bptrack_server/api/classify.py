"""Classification preview endpoint."""

from typing import Annotated, Any

from litestar import Router, get
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK

from bptrack_server.schemas.classification import ClassificationResult
from bptrack_server.schemas.readings import DIASTOLIC_RANGE, SYSTOLIC_RANGE
from bptrack_server.services.classification import classify


@get("/classify", status_code=HTTP_200_OK, sync_to_thread=False)
def classify_reading(
    systolic: Annotated[
        int, Parameter(query="systolic", ge=SYSTOLIC_RANGE[0], le=SYSTOLIC_RANGE[1])
    ],
    diastolic: Annotated[
        int, Parameter(query="diastolic", ge=DIASTOLIC_RANGE[0], le=DIASTOLIC_RANGE[1])
    ],
) -> dict[str, Any]:
    """Classify a systolic/diastolic pair without storing anything.

    Lets a client show the category while the user is still typing.

    Example:
        GET /api/v1/classify?systolic=128&diastolic=82
    """
    metrics = classify(systolic, diastolic)
    return ClassificationResult.from_metrics(systolic, diastolic, metrics).to_json()


classify_router = Router(path="/", route_handlers=[classify_reading], tags=["Classification"])
