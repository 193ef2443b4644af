"""
Network Service
Official partners and collaborations
"""

from highfive.services.collection_service import CollectionService


class PartnerService(CollectionService):
    """Service for official partners"""

    table = "network_partners"
    columns = ("name", "role", "description", "logo_url", "link_url")
    label = "Partner"


class CollaborationService(CollectionService):
    """Service for collaborations"""

    table = "network_collaborations"
    columns = ("name", "description", "highlight", "logo_url", "link_url")
    label = "Collaboration"


# Create singleton instances
partner_service = PartnerService()
collaboration_service = CollaborationService()
