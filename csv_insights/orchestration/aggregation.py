from csv_insights.analysis.models import KeyEmployee, LinkedInAnalysis
from csv_insights.orchestration.session import DownloadableProfile


def aggregate_profiles(
    employees: list[KeyEmployee] | None,
    analysis: LinkedInAnalysis | None,
) -> list[DownloadableProfile]:
    """Merge key employees and post authors into one list keyed by lowercased name.

    Key employees always win a name collision. Entries missing a name or URL
    are skipped. Employees come first, then authors not already present,
    each in their original order.
    """
    profiles: dict[str, DownloadableProfile] = {}

    for employee in employees or []:
        if employee.name and employee.profile_url:
            profiles[employee.name.lower()] = DownloadableProfile(
                name=employee.name, profile_url=employee.profile_url
            )

    for author in analysis.authors if analysis is not None else []:
        key = author.name.lower()
        if author.name and author.profile_url and key not in profiles:
            profiles[key] = DownloadableProfile(name=author.name, profile_url=author.profile_url)

    return list(profiles.values())
