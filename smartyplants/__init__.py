"""Mr. Smartyplants: a plant breeding game.

The player splices plants across seasons, hoping to grow a plant clever
enough to win before pests wipe out the garden. This package holds the
engine-independent rules of the game:

- Genes, dominance and phenotype expression (``smartyplants.genetics``)
- Splicing two plants into a seed (``smartyplants.breeding``)
- Seed growth and name recombination (``smartyplants.plant``,
  ``smartyplants.naming``)
- Garden slots and seasonal pest attrition (``smartyplants.planters``)
- Session state and win/lose evaluation (``smartyplants.game_state``)

Rendering is left to whichever client drives the game; the ``backend``
package exposes these rules over HTTP.
"""

__version__ = "0.1.0"
