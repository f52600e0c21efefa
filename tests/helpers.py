from base.models import OrganizationMember, User


def make_user(email, organization=None, role=None):
    user = User.objects.create_user(email=email, password="pass", organization=organization)
    if organization is not None and role is not None:
        OrganizationMember.objects.create(user=user, organization=organization, role=role)
    return user
