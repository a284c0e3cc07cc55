"""Request/response Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field

from src.complaints.models import ComplaintResult, ScrapedComplaint, ScrapeOutcome


class ScrapeRequest(BaseModel):
    url: str


class ScrapeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    complaint_text: str = Field("", alias="complaintText")
    date: str = ""

    @classmethod
    def from_scraped(cls, scraped: ScrapedComplaint) -> "ScrapeResponse":
        return cls(title=scraped.title, complaint_text=scraped.complaint_text, date=scraped.date)


class ErrorResponse(BaseModel):
    error: str


class ComplaintRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    title: str = ""
    complaint_text: str = Field("", alias="complaintText")
    date: str = ""

    @classmethod
    def from_result(cls, result: ComplaintResult) -> "ComplaintRecord":
        return cls(
            url=result.url,
            title=result.title,
            complaint_text=result.complaint_text,
            date=result.date,
        )

    def to_result(self) -> ComplaintResult:
        return ComplaintResult(
            url=self.url,
            title=self.title,
            complaint_text=self.complaint_text,
            date=self.date,
        )


class OutcomeRecord(BaseModel):
    url: str
    ok: bool
    error: str | None = None

    @classmethod
    def from_outcome(cls, outcome: ScrapeOutcome) -> "OutcomeRecord":
        return cls(url=outcome.url, ok=outcome.ok, error=outcome.error)


class AnalyzeRequest(BaseModel):
    urls: list[str] = Field(..., max_length=100)


class AnalyzeResponse(BaseModel):
    results: list[ComplaintRecord] = []
    outcomes: list[OutcomeRecord] = []


class AnalyzeErrorResponse(ErrorResponse):
    outcomes: list[OutcomeRecord] = []


class ExportRequest(BaseModel):
    results: list[ComplaintRecord] = Field(..., min_length=1)
