"""Example meetings shipped in the downloadable template."""
from ...models import AgendaItem, Meeting

SAMPLE_FILENAME = 'sample-meetings-template.xlsx'


def sample_meetings():
    """Returns fresh copies of the three template meetings."""
    return [
        Meeting(
            id='1',
            title='Q4 Strategy Review',
            stakeholder='Acme Corporation',
            date='2024-01-15',
            time='10:00',
            duration=60,
            status='scheduled',
            location='Conference Room A',
            notes='',
            next_meeting='2024-02-15',
            attendees=['John Smith', 'Sarah Johnson', 'Mike Davis'],
            agenda=[
                AgendaItem('a1', 'Q4 Performance Review', 'Review quarterly metrics and KPIs', 'pending'),
                AgendaItem('a2', '2024 Budget Planning', 'Discuss budget allocation for next year', 'pending'),
                AgendaItem('a3', 'New Product Launch', 'Timeline and resource requirements', 'pending'),
            ],
        ),
        Meeting(
            id='2',
            title='Project Kickoff',
            stakeholder='TechStart Inc',
            date='2024-01-12',
            time='14:00',
            duration=90,
            status='completed',
            location='Virtual - Zoom',
            notes=('Great kickoff meeting. Client is excited about the project. '
                   'Need to finalize resource allocation by end of week.'),
            next_meeting='2024-01-26',
            attendees=['Alice Chen', 'Bob Wilson', 'Carol Brown'],
            agenda=[
                AgendaItem('b1', 'Project Scope Definition', 'Define project boundaries and deliverables', 'discussed'),
                AgendaItem('b2', 'Timeline & Milestones', 'Establish key project milestones', 'discussed'),
                AgendaItem('b3', 'Resource Allocation', 'Team assignments and responsibilities',
                           'action-required', assignee='Project Manager'),
            ],
        ),
        Meeting(
            id='3',
            title='Monthly Check-in',
            stakeholder='Global Solutions Ltd',
            date='2024-01-10',
            time='09:00',
            duration=45,
            status='completed',
            location='Client Office',
            notes='Project is on track. Minor delays in Phase 2 but should be resolved next week.',
            next_meeting='2024-02-10',
            attendees=['David Lee', 'Emma Thompson'],
            agenda=[
                AgendaItem('c1', 'Progress Update', 'Current project status and achievements', 'discussed'),
                AgendaItem('c2', 'Issue Resolution', 'Address any blockers or concerns', 'discussed'),
            ],
        ),
    ]
