"""Example: drive the attendance services directly, without a web layer.

Run from the repository root after ``pip install -e .``.
"""

from datetime import date, timedelta

from gym_attendance.activities.display import to_ui
from gym_attendance.activities.model import LoggedActivity
from gym_attendance.checkins.model import CheckInRecord
from gym_attendance.core.enums import ActivityType, CheckInStatus
from gym_attendance.main import create_container
from gym_attendance.members.model import Member
from gym_attendance.tokens.qr import render_qr_data_url


def main():
    container = create_container()
    now = container.clock.now()

    thor = Member(
        id="1",
        first_name="Thor",
        last_name="Hammer",
        email="thor@gym.test",
        membership_type="Monthly Unlimited",
        date_of_birth=date(1992, now.month, now.day) + timedelta(days=2),
    )
    visit = CheckInRecord(
        id="c1",
        member_id=thor.id,
        member_name=thor.full_name,
        membership_type=thor.membership_type,
        status=CheckInStatus.ACTIVE,
        check_in_time=now - timedelta(minutes=30),
    )
    log = [
        LoggedActivity(id="a1", type=ActivityType.CHECKIN, message="Thor Hammer checked in", timestamp=visit.check_in_time),
    ]

    token = container.token_issuer.issue(thor)
    print(container.token_validator.validate(token.to_payload()).to_dict())
    print(container.checkin_summary.summarize([visit]).to_dict())
    print(container.member_stats.compute_stats([visit], thor.id).to_dict())
    print(container.dashboard.compute([thor], [visit]).to_dict())
    page = container.reception_feed(log, [thor])
    for item in page.items:
        print(to_ui(item))

    # data URL for an <img> tag, truncated for the console
    print(render_qr_data_url(token)[:64] + "...")


if __name__ == "__main__":
    main()
