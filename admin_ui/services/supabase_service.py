import logging

from fastapi import HTTPException
from postgrest.exceptions import APIError
from supabase import create_client, Client

from ..core.config import Config
from ..models import Page, RecordSet
from ..resources import RESOURCES, AdminResource


logger = logging.getLogger(__name__)

# PostgREST error code for a range that starts past the last row
RANGE_NOT_SATISFIABLE = "PGRST103"


def get_client(config: Config) -> Client:
    return create_client(config.SUPABASE_URL, config.SUPABASE_SERVICE_KEY)


class SupabaseRecordSource:
    """Reads admin listings from Supabase tables named after the resources."""

    def __init__(self, config: Config, client: Client | None = None) -> None:
        self.config = config
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_client(self.config)
        return self._client

    def count(self, resource: AdminResource) -> int | None:
        result = self.client.table(resource.name).select('*', count='exact', head=True).execute()
        return result.count

    def fetch_page(self, resource: AdminResource, number: int, per_page: int) -> Page:
        start = (number - 1) * per_page
        end = start + per_page - 1

        try:
            result = (
                self.client
                .table(resource.name)
                .select('*', count='exact')
                .order(resource.order_by)
                .range(start, end)
                .execute()
            )
            rows = result.data or []
            total_count = result.count if result.count is not None else start + len(rows)
        except APIError as e:
            if e.code != RANGE_NOT_SATISFIABLE:
                logger.error(f"Failed to fetch {resource.name} page {number}: {e}")
                raise HTTPException(status_code=500, detail=f"Failed to fetch {resource.name} from database")
            try:
                rows = []
                total_count = self.count(resource) or 0
            except Exception as count_e:
                logger.error(f"Failed to count {resource.name}: {count_e}")
                raise HTTPException(status_code=500, detail=f"Failed to fetch {resource.name} from database")
        except Exception as e:
            logger.error(f"Failed to fetch {resource.name} page {number}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch {resource.name} from database")

        records = tuple(resource.model.from_row(row) for row in rows)

        return Page(
            records=RecordSet(resource.model, records),
            number=number,
            per_page=per_page,
            total_count=total_count,
        )

    def ping(self) -> None:
        self.config.validate()
        resource = next(iter(RESOURCES.values()))
        self.client.table(resource.name).select(resource.order_by).limit(1).execute()
