"""Factory Boy definition for :class:`chirpy.models.chirp.Chirp`."""

from __future__ import annotations

import factory
from chirpy.models.chirp import Chirp
from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class ChirpFactory(BaseFactory):
    class Meta:
        model = Chirp

    author = factory.SubFactory(UserFactory)
    body = factory.Faker("sentence", nb_words=6)
