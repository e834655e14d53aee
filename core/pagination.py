# core/pagination.py
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class EnvelopePagination(PageNumberPagination):
    """Page/limit pagination wrapped in the ``{"success": true, "data": ...}`` envelope"""

    page_size = 10
    page_size_query_param = "limit"
    max_page_size = 50
    results_key = "results"

    def get_paginated_response(self, data):
        return Response(
            {
                "success": True,
                "data": {
                    self.results_key: data,
                    "pagination": {
                        "page": self.page.number,
                        "limit": self.page.paginator.per_page,
                        "total": self.page.paginator.count,
                        "pages": self.page.paginator.num_pages,
                    },
                },
            }
        )
